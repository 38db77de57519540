"""
psfont test suite
command-line interface
"""

import io
import sys
import gzip
import unittest
from contextlib import redirect_stdout, redirect_stderr

from psfont.__main__ import main
from psfont.scripting import wrap_main
from .base import BaseTester, assert_text_eq


class TestMain(BaseTester):
    """Test the psfont script."""

    def run_main(self, *args):
        output = io.StringIO()
        with redirect_stdout(output):
            main([str(_arg) for _arg in args])
        return output.getvalue()

    def setUp(self):
        super().setUp()
        self.font_file = self.temp_path / '8x8.psf.gz'
        self.font_file.write_bytes(gzip.compress(self.psf1_8x8()))

    def test_text(self):
        output = self.run_main(self.font_file, 'A')
        assert_text_eq(output, self.glyph_A_8x8_text)

    def test_codepoint(self):
        output = self.run_main(self.font_file, '-c', '0x41', '--ink', '#', '--paper', ' ')
        self.assertEqual(output.splitlines()[0], '   ##   ')

    def test_padding(self):
        output = self.run_main(self.font_file, 'AA', '--padding', '3')
        self.assertEqual(output.splitlines()[0], '...@@...' + '   ' + '...@@...')

    def test_unknown_option(self):
        with self.assertRaises(SystemExit) as cm:
            with redirect_stderr(io.StringIO()):
                self.run_main(self.font_file, 'A', '--chart')
        self.assertEqual(cm.exception.code, 2)

    def test_broken_pipe(self):
        stdout = sys.stdout
        try:
            with wrap_main():
                raise BrokenPipeError()
            self.assertIsNot(sys.stdout, stdout)
            # output after the pipe closed is discarded without error
            print('discarded')
            sys.stdout.flush()
        finally:
            if sys.stdout is not stdout:
                sys.stdout.close()
            sys.stdout = stdout

    def test_info(self):
        output = self.run_main(self.font_file, '--info')
        self.assertIn('version: PSF1\n', output)
        self.assertIn('glyphs: 256\n', output)
        self.assertIn('width: 8\n', output)
        self.assertIn('height: 8\n', output)
        self.assertNotIn('@', output)

    def test_all_glyphs(self):
        output = self.run_main(self.font_file, '--columns', '32')
        # 8 chart lines of 8 rows, separated by a single padding row
        self.assertEqual(len(output.splitlines()), 8 * 8 + 7)

    def test_image(self):
        image_file = self.temp_path / 'chart.png'
        self.run_main(self.font_file, 'AA', '--image', image_file)
        self.assertTrue(image_file.exists())

    def test_bad_file(self):
        bad_file = self.temp_path / 'bad.psf'
        bad_file.write_bytes(b'\x72\xb5\x4a\x86' + bytes(4))
        with self.assertRaises(SystemExit) as cm:
            self.run_main(bad_file)
        self.assertEqual(cm.exception.code, 1)


if __name__ == '__main__':
    unittest.main()
