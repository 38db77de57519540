"""
psfont.base.image - utilities to deal with images

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from PIL import Image, ImageOps


def bitmap_to_image(data, width, height, paper=(0, 0, 0), ink=(255, 255, 255)):
    """Convert packed rows of 1-bit pixels, msb first, to RGB image."""
    # PIL's raw 1-bit mode uses the same byte-aligned row packing
    img = Image.frombytes('1', (width, height), bytes(data))
    return ImageOps.colorize(img.convert('L'), black=paper, white=ink)


def levels_to_image(matrix, colours):
    """Convert matrix of indices into colours to RGB image."""
    height = len(matrix)
    width = len(matrix[0]) if height else 0
    img = Image.new('P', (width, height))
    img.putpalette([_c for _colour in colours for _c in _colour])
    img.putdata([_pix for _row in matrix for _pix in _row])
    return img.convert('RGB')
