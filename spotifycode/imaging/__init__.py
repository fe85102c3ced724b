"""Imaging modules for Spotify Code Generator"""

from .color import dominant_color
from .compose import save_image, stitch_vertical
from .download import download_image

__all__ = ['dominant_color', 'save_image', 'stitch_vertical', 'download_image']
