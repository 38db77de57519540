"""
psfont.font - character-cell font held in a PSF buffer

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging

from .base.binary import ceildiv
from .glyph import Glyph


class Font:
    """
    Glyph table of a PC Screen Font.

    The font keeps a read-only view on the buffer it was parsed from; glyphs
    are located in it on demand. Use psfont.parse() to create a Font.
    """

    __slots__ = (
        '_data', '_version', '_glyph_count', '_width', '_height',
        '_stride', '_data_offset', '_has_unicode_table',
    )

    def __init__(
            self, data, *,
            glyph_count, width, height, data_offset,
            version, has_unicode_table=False,
        ):
        """Set up font descriptor on a buffer with a glyph table at data_offset."""
        self._data = memoryview(data).cast('B').toreadonly()
        self._version = version
        self._glyph_count = glyph_count
        self._width = width
        self._height = height
        self._stride = ceildiv(width, 8)
        self._data_offset = data_offset
        self._has_unicode_table = bool(has_unicode_table)
        assert self._width <= self._stride * 8

    def __repr__(self):
        """Text representation."""
        return (
            f'<{type(self).__name__} PSF{self._version} '
            f'{self._glyph_count} glyphs {self._width}x{self._height}>'
        )

    def __len__(self):
        """Number of glyph slots."""
        return self._glyph_count

    ##########################################################################
    # geometry

    @property
    def version(self):
        """PSF header version, 1 or 2."""
        return self._version

    @property
    def glyph_count(self):
        """Number of glyph slots in the table."""
        return self._glyph_count

    @property
    def width(self):
        """Width of every glyph, in pixels."""
        return self._width

    @property
    def height(self):
        """Height of every glyph, in pixels."""
        return self._height

    @property
    def row_byte_width(self):
        """Number of bytes per pixel row."""
        return self._stride

    @property
    def glyph_size(self):
        """Number of bytes per glyph."""
        return self._stride * self._height

    @property
    def data_offset(self):
        """Offset of the glyph table in the buffer."""
        return self._data_offset

    @property
    def has_unicode_table(self):
        """Header announces a unicode table after the glyphs."""
        return self._has_unicode_table

    @property
    def data(self):
        """Read-only view on the source buffer."""
        return self._data

    ##########################################################################
    # glyph access

    def get_glyph(self, code, *, copy=False):
        """
        Get glyph at index `code`; None if the font has no such glyph.

        code: glyph index; a single-character string is converted to its ordinal
        copy: return a glyph holding its own bytes instead of a view on the font buffer
        """
        if isinstance(code, str):
            code = ord(code)
        if code < 0 or code >= self._glyph_count:
            return None
        offset = self._data_offset + code * self.glyph_size
        if offset + self.glyph_size > len(self._data):
            logging.debug(
                'Glyph %d lies beyond end of data at offset %d.', code, offset
            )
            return None
        if copy:
            return Glyph.copy(self._data, offset, self._width, self._height)
        return Glyph.view(self._data, offset, self._width, self._height)

    def get_char(self, char, *, copy=False):
        """Get glyph for a character; None if not in the font."""
        return self.get_glyph(ord(char), copy=copy)

    def glyphs(self, *, copy=False):
        """Iterate over the glyphs present in the buffer, in table order."""
        for code in range(self._glyph_count):
            glyph = self.get_glyph(code, copy=copy)
            if glyph is None:
                break
            yield glyph
