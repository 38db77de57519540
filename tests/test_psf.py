"""
psfont test suite
psf header parsing
"""

import unittest

import psfont
from psfont import errors
from psfont.psf import parse, identify
from .base import BaseTester, make_psf1, make_psf2


class TestParsePSF1(BaseTester):
    """Test PSF version 1 header."""

    def test_minimal(self):
        """Header with 256 one-row blank glyphs."""
        font = parse(bytes((0x36, 0x04, 0x00, 0x01)) + bytes(256))
        self.assertEqual(font.version, 1)
        self.assertEqual(font.glyph_count, 256)
        self.assertEqual(font.width, 8)
        self.assertEqual(font.height, 1)
        self.assertEqual(font.row_byte_width, 1)
        self.assertEqual(font.data_offset, 4)
        for glyph in font.glyphs():
            self.assertEqual(
                [glyph.get(_x, 0) for _x in range(8)], [False] * 8
            )
        self.assertEqual(len(list(font.glyphs())), 256)

    def test_mode_selects_count(self):
        for mode, count in ((0, 256), (1, 512), (2, 256), (3, 512)):
            with self.subTest(mode=mode):
                font = parse(self.psf1_8x8(mode))
                self.assertEqual(font.glyph_count, count)
                self.assertEqual(len(font), count)
                self.assertEqual(font.has_unicode_table, bool(mode & 2))

    def test_invalid_mode(self):
        for mode in (4, 5, 0xff):
            with self.subTest(mode=mode):
                with self.assertRaises(errors.GlyphCountError) as cm:
                    parse(make_psf1([bytes(8)] * 256, 8, mode))
                self.assertEqual(cm.exception.selector, mode)

    def test_bad_magic(self):
        with self.assertRaises(errors.BadMagicError):
            parse(bytes((0x36, 0x05, 0x00, 0x08)) + bytes(2048))

    def test_truncated_header(self):
        for data in (b'\x36', b'\x36\x04', b'\x36\x04\x00'):
            with self.subTest(data=data):
                with self.assertRaises(errors.TruncatedHeaderError) as cm:
                    parse(data)
                self.assertEqual(cm.exception.required, 4)
                self.assertEqual(cm.exception.size, len(data))

    def test_header_only(self):
        """Header without glyph table parses, but glyphs are not available."""
        with self.assertLogs(level='WARNING'):
            font = parse(b'\x36\x04\x00\x08')
        self.assertEqual(font.glyph_count, 256)
        self.assertIsNone(font.get_glyph(0))
        self.assertEqual(list(font.glyphs()), [])

    def test_glyph_A(self):
        font = parse(self.psf1_8x8())
        self.assertEqual(font.get_glyph(0x41).as_text(), self.glyph_A_8x8_text)
        self.assertEqual(font.get_char('A').as_bytes(), self.glyph_A_8x8)


class TestParsePSF2(BaseTester):
    """Test PSF version 2 header."""

    def test_geometry(self):
        font = parse(self.psf2_10x3())
        self.assertEqual(font.version, 2)
        self.assertEqual(font.glyph_count, 4)
        self.assertEqual(font.width, 10)
        self.assertEqual(font.height, 3)
        self.assertEqual(font.row_byte_width, 2)
        self.assertEqual(font.glyph_size, 6)
        self.assertEqual(font.data_offset, 32)
        self.assertFalse(font.has_unicode_table)

    def test_row_byte_width(self):
        for width, stride in ((1, 1), (8, 1), (9, 2), (16, 2), (17, 3)):
            with self.subTest(width=width):
                font = parse(make_psf2([bytes(stride * 2)], width, 2))
                self.assertEqual(font.row_byte_width, stride)

    def test_glyphs(self):
        font = parse(self.psf2_10x3())
        self.assertEqual(font.get_glyph(1).as_text(), self.glyph_10x3_text)
        self.assertTrue(font.get_glyph(0).is_blank())
        self.assertEqual(font.get_glyph(3).as_text(), '@' * 10 + '\n' + '@' * 10 + '\n' + '@' * 10 + '\n')

    def test_unicode_flag(self):
        font = parse(make_psf2([bytes(8)], 8, 8, flags=1))
        self.assertTrue(font.has_unicode_table)

    def test_count_from_two_bytes(self):
        font = parse(make_psf2([bytes(1)] * 0x1234, 8, 1))
        self.assertEqual(font.glyph_count, 0x1234)

    def test_truncated_header(self):
        data = make_psf2([], 8, 8)
        for size in (1, 4, 31):
            with self.subTest(size=size):
                with self.assertRaises(errors.TruncatedHeaderError) as cm:
                    parse(data[:size])
                self.assertEqual(cm.exception.required, 32)

    def test_bad_magic(self):
        data = bytearray(make_psf2([bytes(8)], 8, 8))
        for index in (1, 2, 3):
            with self.subTest(index=index):
                bad = bytearray(data)
                bad[index] ^= 0xff
                with self.assertRaises(errors.BadMagicError):
                    parse(bad)

    def test_version(self):
        with self.assertRaises(errors.UnsupportedVersionError) as cm:
            parse(make_psf2([bytes(8)], 8, 8, version=1))
        self.assertEqual(cm.exception.version, 1)

    def test_header_offset(self):
        with self.assertRaises(errors.HeaderOffsetError) as cm:
            parse(make_psf2([bytes(8)], 8, 8, headersize=0x40))
        self.assertEqual(cm.exception.offset, 0x40)
        self.assertIn('0x40', str(cm.exception))

    def test_inconsistent_charsize(self):
        with self.assertLogs(level='WARNING') as cm:
            font = parse(make_psf2([bytes(8)], 8, 8, charsize=99))
        self.assertIn('char size', cm.output[0])
        self.assertEqual(font.glyph_size, 8)

    def test_dimensions_truncated_to_byte(self):
        data = bytearray(make_psf2([bytes(16)], 8, 16))
        # set high bytes of height and width fields
        data[25] = 0x01
        data[29] = 0x01
        font = parse(bytes(data))
        self.assertEqual(font.height, 16)
        self.assertEqual(font.width, 8)


class TestParse(BaseTester):
    """Test format detection."""

    def test_empty(self):
        with self.assertRaises(errors.EmptyFontError):
            parse(b'')

    def test_unrecognised(self):
        with self.assertRaises(errors.UnrecognisedFormatError) as cm:
            parse(b'\x1f\x8b\x08\x00')
        self.assertEqual(cm.exception.magic, 0x1f)

    def test_errors_are_file_format_errors(self):
        for data in (b'', b'\x00', b'\x36', b'\x72\x00'):
            with self.subTest(data=data):
                with self.assertRaises(psfont.FileFormatError):
                    parse(data)
                with self.assertRaises(ValueError):
                    parse(data)

    def test_buffer_types(self):
        data = self.psf1_8x8()
        for buffer in (data, bytearray(data), memoryview(data)):
            with self.subTest(type=type(buffer)):
                font = parse(buffer)
                self.assertEqual(font.get_char('A').as_bytes(), self.glyph_A_8x8)

    def test_identify(self):
        self.assertEqual(identify(self.psf1_8x8()), 1)
        self.assertEqual(identify(self.psf2_10x3()), 2)
        self.assertIsNone(identify(b'\x36\x05'))
        self.assertIsNone(identify(b''))

    def test_font_is_read_only(self):
        font = parse(self.psf1_8x8())
        with self.assertRaises(AttributeError):
            font.width = 16
        with self.assertRaises(TypeError):
            font.data[0] = 0


if __name__ == '__main__':
    unittest.main()
