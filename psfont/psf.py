"""
psfont.psf - PC Screen Font format

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging

from .base.binary import ceildiv
from .base.struct import little_endian as le, sizeof
from .errors import (
    EmptyFontError, UnrecognisedFormatError, TruncatedHeaderError,
    BadMagicError, UnsupportedVersionError, HeaderOffsetError,
    GlyphCountError, TableLengthError,
)
from .font import Font


# PSF formats:
# https://www.win.tue.nl/~aeb/linux/kbd/font-formats-1.html


# PSF1 header
_PSF1_MAGIC = b'\x36\x04'
_PSF1_HEADER = le.Struct(
    mode='uint8',
    charsize='uint8',
)
_PSF1_HEADER_SIZE = 4

# mode field
# 0x01 selects 512 glyphs, 0x02 announces a unicode table
_PSF1_MODE_COUNT = {0: 256, 1: 512, 2: 256, 3: 512}
_PSF1_MODEHASTAB = 0x02
_PSF1_WIDTH = 8


# PSF2 header
_PSF2_MAGIC = b'\x72\xb5\x4a\x86'
_PSF2_HEADER = le.Struct(
    version='uint32',
    headersize='uint32',
    flags='uint32',
    # the 32-bit glyph count is read as two 16-bit halves
    length='uint16',
    table_length='uint16',
    charsize='uint32',
    height='uint32',
    width='uint32',
)
_PSF2_HEADER_SIZE = 0x20

# flags field
_PSF2_HAS_UNICODE_TABLE = 0x01

# only version recognized so far
_PSF2_VERSION = 0
_PSF2_MAX_TABLE_LENGTH = 0x10000


def identify(data):
    """PSF version suggested by the magic bytes, or None."""
    data = bytes(data[:len(_PSF2_MAGIC)])
    if data.startswith(_PSF1_MAGIC):
        return 1
    if data.startswith(_PSF2_MAGIC):
        return 2
    return None


def parse(data):
    """
    Parse a PC Screen Font held in a bytes-like buffer.

    Returns a Font referencing the buffer.
    Raises a FileFormatError subclass if the data is not a supported PSF.
    """
    data = memoryview(data).cast('B')
    if not len(data):
        raise EmptyFontError()
    if data[0] == _PSF1_MAGIC[0]:
        font = _parse_psf1(data)
    elif data[0] == _PSF2_MAGIC[0]:
        font = _parse_psf2(data)
    else:
        raise UnrecognisedFormatError(data[0])
    table_size = font.glyph_count * font.glyph_size
    available = len(data) - font.data_offset
    if available < table_size:
        logging.warning(
            'Glyph table truncated: expected %d bytes, found %d.',
            table_size, available
        )
    return font


def _log_header(psf_props):
    logging.info('PSF properties:')
    for name, value in vars(psf_props).items():
        logging.info('    %s: %s', name, value)


def _parse_psf1(data):
    """Parse PSF version 1 header."""
    if len(data) < _PSF1_HEADER_SIZE:
        raise TruncatedHeaderError(1, _PSF1_HEADER_SIZE, len(data))
    magic = data[:len(_PSF1_MAGIC)]
    if magic != _PSF1_MAGIC:
        raise BadMagicError(1, magic)
    psf_props = _PSF1_HEADER.from_bytes(data, len(_PSF1_MAGIC))
    _log_header(psf_props)
    try:
        length = _PSF1_MODE_COUNT[psf_props.mode]
    except KeyError:
        raise GlyphCountError(psf_props.mode) from None
    offset = len(_PSF1_MAGIC) + sizeof(_PSF1_HEADER)
    assert offset == _PSF1_HEADER_SIZE, f'PSF1 header parsed as {offset} bytes'
    return Font(
        data,
        version=1,
        glyph_count=length,
        width=_PSF1_WIDTH,
        height=psf_props.charsize,
        data_offset=offset,
        has_unicode_table=psf_props.mode & _PSF1_MODEHASTAB,
    )


def _parse_psf2(data):
    """Parse PSF version 2 header."""
    if len(data) < _PSF2_HEADER_SIZE:
        raise TruncatedHeaderError(2, _PSF2_HEADER_SIZE, len(data))
    magic = data[:len(_PSF2_MAGIC)]
    if magic != _PSF2_MAGIC:
        raise BadMagicError(2, magic)
    psf_props = _PSF2_HEADER.from_bytes(data, len(_PSF2_MAGIC))
    _log_header(psf_props)
    if psf_props.version != _PSF2_VERSION:
        raise UnsupportedVersionError(psf_props.version)
    if psf_props.headersize != _PSF2_HEADER_SIZE:
        raise HeaderOffsetError(psf_props.headersize, _PSF2_HEADER_SIZE)
    if psf_props.table_length > _PSF2_MAX_TABLE_LENGTH:
        raise TableLengthError(psf_props.table_length, _PSF2_MAX_TABLE_LENGTH)
    # dimensions are stored as 32 bits but only the low byte is used
    height = psf_props.height & 0xff
    width = psf_props.width & 0xff
    charsize = height * ceildiv(width, 8)
    if psf_props.charsize != charsize:
        logging.warning('Ignoring inconsistent char size in PSF header.')
    offset = len(_PSF2_MAGIC) + sizeof(_PSF2_HEADER)
    assert offset == _PSF2_HEADER_SIZE, f'PSF2 header parsed as {offset} bytes'
    return Font(
        data,
        version=2,
        glyph_count=psf_props.length,
        width=width,
        height=height,
        data_offset=offset,
        has_unicode_table=psf_props.flags & _PSF2_HAS_UNICODE_TABLE,
    )
