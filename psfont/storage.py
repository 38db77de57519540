"""
psfont.storage - read font files, optionally gzip-compressed

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import gzip
import zlib
import logging
from pathlib import Path
from contextlib import contextmanager

from .errors import FileFormatError
from .psf import parse


class GzipCompressor:
    """Single-file gzip wrapper, as used for distributed console fonts."""

    name = 'gzip'
    magic = b'\x1f\x8b'
    # errors raised for bad compressed data
    error = (gzip.BadGzipFile, EOFError, zlib.error)

    @classmethod
    def matches(cls, data):
        """Check if the magic signature is present."""
        return bytes(data[:len(cls.magic)]) == cls.magic

    @classmethod
    @contextmanager
    def _translate_errors(cls):
        """Context wrapper to convert library-specific errors to ours."""
        try:
            yield
        except cls.error as e:
            raise FileFormatError(f'Bad {cls.name} data: {e}') from e

    @classmethod
    def decompress(cls, data):
        """Get the uncompressed payload."""
        with cls._translate_errors():
            return gzip.decompress(data)


def loads(data):
    """Parse font from bytes, decompressing first if needed."""
    if GzipCompressor.matches(data):
        logging.debug('Decompressing %s payload.', GzipCompressor.name)
        data = GzipCompressor.decompress(data)
    return parse(data)


def load(infile):
    """
    Load font from a file.

    infile: path to the font file, or binary stream open for reading
    """
    if isinstance(infile, (str, Path)):
        path = Path(infile)
        logging.debug('Reading font file `%s`.', path)
        data = path.read_bytes()
    else:
        name = getattr(infile, 'name', '')
        logging.debug('Reading font stream `%s`.', name)
        data = infile.read()
    return loads(data)
