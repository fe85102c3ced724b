"""
Image composition module for Spotify Code Generator
Stacks cover art and Spotify Code and writes the result as PNG
"""

import os

from PIL import Image


def stitch_vertical(top, bottom):
    """
    Place one image directly above another

    The canvas is as wide as the top image and as tall as both images
    together. Pixels are copied as-is: nothing is scaled or blended, so a
    narrower image leaves the rest of its band transparent and a wider one
    is clipped.

    Args:
        top: Image for the top region (the cover)
        bottom: Image for the bottom region (the code)

    Returns:
        PIL.Image.Image: New RGBA image
    """
    width = top.width
    height = top.height + bottom.height

    result = Image.new('RGBA', (width, height))
    result.paste(top.convert('RGBA'), (0, 0))
    result.paste(bottom.convert('RGBA'), (0, top.height))
    return result


def save_image(image, basename):
    """
    Save an image as <basename>.png

    Errors are reported and swallowed so callers can carry on.

    Args:
        image: PIL.Image.Image to save
        basename: Output path without extension

    Returns:
        str or None: Written path, or None if saving failed
    """
    filename = f"{basename}.png"
    try:
        file = open(filename, 'wb')
    except OSError as e:
        print(f"❌ Error creating file: {e}")
        return None

    try:
        with file:
            image.save(file, format='PNG')
    except (OSError, ValueError) as e:
        print(f"❌ Error encoding image: {e}")
        # Do not leave a truncated file behind
        try:
            os.remove(filename)
        except OSError as remove_error:
            print(f"⚠ Could not remove {filename}: {remove_error}")
        return None

    return filename
