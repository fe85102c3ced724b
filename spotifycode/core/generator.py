"""
Core Spotify Code Generator class
Orchestrates the pipeline: cover art, dominant color, Spotify Code, composite
"""

from spotifycode.config.settings import DEFAULT_BAR_COLOR, DEFAULT_FORMAT
from spotifycode.imaging.color import dominant_color
from spotifycode.imaging.compose import save_image, stitch_vertical
from spotifycode.spotify.client import SpotifyClient
from spotifycode.spotify.codes import get_code_image


class SpotifyCodeGenerator:
    """Builds cover-plus-code images for Spotify albums"""

    def __init__(self, client_id, client_secret, session=None, verbose=False):
        self.verbose = verbose
        self.spotify = SpotifyClient(client_id, client_secret, session=session, verbose=verbose)
        self.session = self.spotify.session
        self.last_color = None

    def get_code(self, uri, color=None, bar_color=DEFAULT_BAR_COLOR, image_format=DEFAULT_FORMAT):
        """
        Build the cover-plus-code image for a Spotify URI

        Steps run in order; the code request needs the cover's color and
        width, so nothing here can run in parallel.

        Args:
            uri: Spotify URI
            color: Background color override (default: cover's dominant color)
            bar_color: Bar color for the code
            image_format: Format to request the code in

        Returns:
            PIL.Image.Image: Cover on top, code below
        """
        cover = self.spotify.get_cover_image(uri)

        if color is None:
            color = dominant_color(cover)
            if self.verbose:
                print(f"✓ Dominant color: {color}")
        self.last_color = color

        size = cover.width
        code = get_code_image(
            uri, color,
            bar_color=bar_color,
            size=size,
            image_format=image_format,
            session=self.session,
            verbose=self.verbose,
        )

        return stitch_vertical(cover, code)

    def save_image(self, image, basename):
        """Save the image as <basename>.png, returning the path or None"""
        return save_image(image, basename)
