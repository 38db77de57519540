"""
psfont - read PC Screen Font (PSF) console fonts

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .constants import VERSION as __version__
from .errors import FileFormatError
from .font import Font
from .glyph import Glyph
from .psf import parse, identify
from .storage import load, loads
from . import errors
