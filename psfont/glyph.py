"""
psfont.glyph - single glyph bitmap

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .base.binary import ceildiv, get_bit, bytes_to_bits
from .base.image import bitmap_to_image


class Glyph:
    """
    Bitmap of a single character.

    Pixel rows are stored consecutively, each row padded to a whole number of
    bytes with the leftmost pixel in the most significant bit.

    Create through one of the two constructors:
    - Glyph.view: borrows the bytes from the source buffer, no copy is made.
      Changes to a mutable source buffer will show through.
    - Glyph.copy: holds its own copy of the bytes.
    """

    __slots__ = ('_data', '_width', '_height', '_stride', '_owned')

    def __init__(self, data, width, height, *, owned=True):
        """Create glyph from packed row data; use view() or copy() instead."""
        stride = ceildiv(width, 8)
        if len(data) != stride * height:
            raise ValueError(
                f'Glyph of {width}x{height} pixels needs {stride * height} bytes, '
                f'got {len(data)}.'
            )
        self._data = data
        self._width = width
        self._height = height
        self._stride = stride
        self._owned = owned

    @classmethod
    def view(cls, buffer, offset, width, height):
        """Glyph referencing bytes in buffer starting at offset."""
        size = ceildiv(width, 8) * height
        data = memoryview(buffer)[offset:offset+size].toreadonly()
        return cls(data, width, height, owned=False)

    @classmethod
    def copy(cls, buffer, offset, width, height):
        """Glyph holding a copy of the bytes in buffer starting at offset."""
        size = ceildiv(width, 8) * height
        data = bytes(memoryview(buffer)[offset:offset+size])
        return cls(data, width, height, owned=True)

    def detach(self):
        """Return a glyph that does not depend on the source buffer."""
        if self._owned:
            return self
        return type(self)(bytes(self._data), self._width, self._height)

    def __repr__(self):
        """Text representation."""
        return (
            f'<{type(self).__name__} {self._width}x{self._height}'
            f"{' owned' if self._owned else ' view'}>"
        )

    def __eq__(self, other):
        if not isinstance(other, Glyph):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and bytes(self._data) == bytes(other._data)
        )

    def __hash__(self):
        return hash((self._width, self._height, bytes(self._data)))

    @property
    def width(self):
        """Glyph width in pixels."""
        return self._width

    @property
    def height(self):
        """Glyph height in pixels."""
        return self._height

    @property
    def row_byte_width(self):
        """Number of bytes holding one pixel row."""
        return self._stride

    @property
    def owned(self):
        """Glyph holds its own copy of the bitmap."""
        return self._owned

    @property
    def data(self):
        """Packed row data; a read-only memoryview for views, bytes for copies."""
        return self._data

    def get(self, x, y):
        """
        Pixel at column x, row y: True for ink, False for paper.
        Returns None outside the glyph.
        """
        if x < 0 or y < 0 or x >= self._width or y >= self._height:
            return None
        return get_bit(self._data[y * self._stride + x // 8], x % 8)

    def is_blank(self):
        """Glyph has no inked pixels."""
        return not any(self.as_bits())

    def as_bytes(self):
        """Copy of the packed row data."""
        return bytes(self._data)

    def as_bits(self):
        """Flat tuple of pixel booleans, row by row."""
        return tuple(
            _bit
            for _y in range(self._height)
            for _bit in self._row_bits(_y)
        )

    def _row_bits(self, y):
        start = y * self._stride
        return bytes_to_bits(self._data[start:start+self._stride], self._width)

    def as_matrix(self, *, ink=1, paper=0):
        """Return matrix of user-specified foreground and background objects."""
        return tuple(
            tuple(ink if _bit else paper for _bit in self._row_bits(_y))
            for _y in range(self._height)
        )

    def as_text(self, *, ink='@', paper='.', start='', end='\n'):
        """Convert glyph to text."""
        if not self._height:
            return ''
        return ''.join(
            start + ''.join(_row) + end
            for _row in self.as_matrix(ink=ink, paper=paper)
        )

    def as_image(self, *, paper=(0, 0, 0), ink=(255, 255, 255)):
        """Convert glyph to PIL image."""
        return bitmap_to_image(
            self._data, self._width, self._height, paper=paper, ink=ink
        )
