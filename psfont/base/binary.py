"""
psfont.base.binary - binary utilities

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


def ceildiv(num, den):
    """Integer division, rounding up."""
    return -(-num // den)


def bytes_to_bits(byteseq, width=None):
    """Convert bytes/bytearray/sequence of int to tuple of bits, msb first."""
    if not byteseq:
        return ()
    bitstr = bin(int.from_bytes(bytes(byteseq), 'big'))[2:].zfill(8 * len(byteseq))
    bits = tuple(_c == '1' for _c in bitstr)
    if width is None:
        return bits
    return bits[:width]


def get_bit(byte, index):
    """Bit at index counted from the most significant end of a byte."""
    return bool((byte >> (7 - index)) & 1)
