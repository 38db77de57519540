"""
psfont.errors - exceptions for malformed font data

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


class FileFormatError(ValueError):
    """Incorrect file format."""


class EmptyFontError(FileFormatError):
    """No data at all."""

    def __init__(self):
        super().__init__('Not a PSF file: empty buffer.')


class UnrecognisedFormatError(FileFormatError):
    """Leading byte does not select a PSF version."""

    def __init__(self, magic):
        self.magic = magic
        super().__init__(
            f'Not a PSF file: leading byte 0x{magic:02x} '
            'not one of 0x36 (PSF1), 0x72 (PSF2).'
        )


class TruncatedHeaderError(FileFormatError):
    """Buffer shorter than the header of the detected version."""

    def __init__(self, version, required, size):
        self.version = version
        self.required = required
        self.size = size
        super().__init__(
            f'PSF{version} header requires {required} bytes, '
            f'buffer holds only {size}.'
        )


class BadMagicError(FileFormatError):
    """Magic sequence incomplete."""

    def __init__(self, version, magic):
        self.version = version
        self.magic = bytes(magic)
        super().__init__(
            f'Not a PSF{version} file: bad magic bytes {self.magic.hex(" ")}.'
        )


class UnsupportedVersionError(FileFormatError):
    """PSF2 header version other than 0."""

    def __init__(self, version):
        self.version = version
        super().__init__(f'Unsupported PSF2 header version {version}.')


class HeaderOffsetError(FileFormatError):
    """PSF2 header size field does not match the fixed header size."""

    def __init__(self, offset, expected=0x20):
        self.offset = offset
        self.expected = expected
        super().__init__(
            f'Unexpected PSF2 glyph data offset {offset:#x}, '
            f'expected {expected:#x}.'
        )


class GlyphCountError(FileFormatError):
    """PSF1 mode byte does not select a glyph count."""

    def __init__(self, selector):
        self.selector = selector
        super().__init__(f'Invalid PSF1 mode {selector:#04x}.')


class TableLengthError(FileFormatError):
    """Declared glyph table length out of range."""

    def __init__(self, length, maximum=0x10000):
        self.length = length
        self.maximum = maximum
        super().__init__(
            f'Declared glyph table length {length} exceeds {maximum}.'
        )
