"""
Image download module for Spotify Code Generator
Fetches an image over HTTP and decodes it with Pillow
"""

from io import BytesIO

import requests
from PIL import Image, UnidentifiedImageError

from spotifycode.config.settings import REQUEST_TIMEOUT
from spotifycode.errors import DecodeError, TransportError


def decode_image(data, source='response'):
    """
    Decode raw bytes into a Pillow image

    Image.open is lazy, so the pixel data is loaded here to surface
    truncated or corrupt bodies immediately.
    """
    try:
        image = Image.open(BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise DecodeError(f"Error decoding image from {source}: {e}") from e
    return image


def download_image(url, session=None, timeout=REQUEST_TIMEOUT):
    """
    Download and decode an image

    Args:
        url: Image URL
        session: Optional requests.Session (module-level requests if None)
        timeout: Request timeout in seconds

    Returns:
        PIL.Image.Image: Decoded image

    Raises:
        TransportError: On network failure or non-success status
        DecodeError: If the body is not an image
    """
    http = session or requests
    try:
        with http.get(url, timeout=timeout) as response:
            response.raise_for_status()
            content = response.content
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Error downloading {url}: {e}") from e

    return decode_image(content, source=url)
