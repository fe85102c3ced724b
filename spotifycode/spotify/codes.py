"""
Spotify Code module for Spotify Code Generator
Builds spotifycodes.com download URLs and fetches the code image
"""

from urllib.parse import quote_plus

from spotifycode.config.settings import (
    DEFAULT_BAR_COLOR,
    DEFAULT_CODE_SIZE,
    DEFAULT_FORMAT,
    SPOTIFY_CODES_URL,
    SUPPORTED_FORMATS,
)
from spotifycode.errors import UnsupportedFormatError
from spotifycode.imaging.download import download_image


def build_code_url(spotify_uri, color, bar_color=DEFAULT_BAR_COLOR, size=DEFAULT_CODE_SIZE,
                   image_format=DEFAULT_FORMAT):
    """
    Build the download URL for a Spotify Code

    Args:
        spotify_uri: Spotify URI the code should encode
        color: Background color as hex, with or without a leading '#'
        bar_color: Bar color ('white' or 'black')
        size: Code width in pixels
        image_format: Image format requested from the service

    Returns:
        str: Download URL
    """
    if color.startswith('#'):
        color = color[1:]
    segment = f"/{color}/{bar_color}/{size}/{spotify_uri}"
    return SPOTIFY_CODES_URL.format(format=image_format) + quote_plus(segment)


def get_code_image(spotify_uri, color, bar_color=DEFAULT_BAR_COLOR, size=DEFAULT_CODE_SIZE,
                   image_format=DEFAULT_FORMAT, session=None, verbose=False):
    """
    Download a Spotify Code image (no authentication needed)

    Returns:
        PIL.Image.Image: Decoded code image
    """
    if image_format not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(
            f"Unsupported code format {image_format!r} (choose from {', '.join(SUPPORTED_FORMATS)})"
        )

    url = build_code_url(spotify_uri, color, bar_color, size, image_format)
    if verbose:
        print(f"→ Spotify Code: {url}")
    return download_image(url, session=session)
