"""
psfont.base.struct - binary structures

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import ctypes
from types import SimpleNamespace
from functools import partial


class StructError(ValueError):
    """Buffer does not fit the structure."""


# type strings
TYPES = {
    'uint8': ctypes.c_uint8,
    'B': ctypes.c_uint8,
    'uint16': ctypes.c_uint16,
    'H': ctypes.c_uint16,
    'uint32': ctypes.c_uint32,
    'I': ctypes.c_uint32,
}


def _parse_type(atype):
    """Convert struct member type string to ctypes base type."""
    if isinstance(atype, type):
        return atype
    try:
        return TYPES[atype]
    except KeyError:
        pass
    raise ValueError('Field type `{}` not understood'.format(atype))


class StructValue:
    """Wrapper for ctypes Structure value."""

    def __init__(self, cvalue):
        self._cvalue = cvalue

    def __getattr__(self, attr):
        if not attr.startswith('_'):
            return getattr(self._cvalue, attr)
        raise AttributeError(attr)

    def __bytes__(self):
        return bytes(self._cvalue)

    @property
    def __dict__(self):
        return dict(
            (field, getattr(self._cvalue, field))
            for field, *_ in self._cvalue._fields_
        )

    def __repr__(self):
        return type(self).__name__ + '({})'.format(
            ', '.join(
                '{}={}'.format(_fld, _val)
                for _fld, _val in vars(self).items()
            )
        )


class StructType:
    """
    Represent a structured type.

    mystruct = StructType('big', first='uint8', second='uint16')
    s = mystruct(first=1, second=2)

    assert bytes(s) == b'\\1\\0\\2'
    assert mystruct.from_bytes(b'\\1\\0\\2').second == 2
    """

    def __init__(self, endian, /, **description):
        """Create a structured type."""
        if endian[:1].lower() in ('b', '>'):
            parent = ctypes.BigEndianStructure
        elif endian[:1].lower() in ('l', '<'):
            parent = ctypes.LittleEndianStructure
        else:
            raise ValueError(f"Endianness '{endian}' not recognised.")

        class _CStruct(parent):
            _fields_ = tuple(
                (_field, _parse_type(_type))
                for _field, _type in description.items()
            )
            _pack_ = 1
            _layout_ = 'ms'

        self._ctype = _CStruct

    def __call__(self, **kwargs):
        """Instantiate a struct variable."""
        return StructValue(self._ctype(**kwargs))

    def from_bytes(self, buffer, offset=0):
        """Read struct from a buffer at the given offset."""
        try:
            cvalue = self._ctype.from_buffer_copy(buffer, offset)
        except ValueError as e:
            raise StructError(e) from e
        return StructValue(cvalue)

    @property
    def size(self):
        """Size of the structure in bytes."""
        return ctypes.sizeof(self._ctype)


def sizeof(wrapped):
    """Get size in bytes of a type or value."""
    if isinstance(wrapped, StructType):
        return wrapped.size
    return ctypes.sizeof(wrapped._cvalue)


little_endian = SimpleNamespace(
    Struct=partial(StructType, '<'),
)
