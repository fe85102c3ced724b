"""
Dominant color extraction for Spotify Code Generator
Wraps ColorThief's median-cut quantization for already-decoded images
"""

from colorthief import ColorThief

from spotifycode.errors import DecodeError


class ImageColorThief(ColorThief):
    """ColorThief that works on a Pillow image instead of a file"""

    def __init__(self, image):
        self.image = image


def to_hex(rgb):
    """Format an (r, g, b) tuple as #RRGGBB"""
    r, g, b = rgb[:3]
    return f"#{r:02X}{g:02X}{b:02X}"


def dominant_color(image):
    """
    Find the dominant color of an image

    Args:
        image: PIL.Image.Image

    Returns:
        str: Color as '#RRGGBB'

    Raises:
        DecodeError: If the image is empty
    """
    width, height = image.size
    if width == 0 or height == 0:
        raise DecodeError("Cannot find the dominant color of an empty image")

    rgb = image.convert('RGB')

    # Median cut cannot split a single color; it is trivially dominant
    colors = rgb.getcolors(maxcolors=1)
    if colors:
        return to_hex(colors[0][1])

    try:
        color = ImageColorThief(image).get_color(quality=1)
    except Exception:
        # ColorThief raises a bare Exception when no pixel survives its
        # transparency and near-white filter; use the most frequent color
        count, color = max(rgb.getcolors(maxcolors=width * height))
    return to_hex(color)
