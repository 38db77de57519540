"""
Show glyphs from a PC Screen Font
(c) 2019--2024 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

import sys
import argparse
import logging

import psfont
from psfont.chart import chart, chart_image
from psfont.scripting import wrap_main


def _int(value):
    """Convert decimal, 0x hex, 0o octal or 0b binary string to int."""
    return int(value, 0)


def _char(value):
    """Single character argument."""
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f'expected a single character, got `{value}`')
    return value


def get_parser():
    """Command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog='psfont',
        description='Show glyphs from a PC Screen Font (PSF) file.',
    )
    parser.add_argument(
        'infile',
        help='PSF version 1 or 2 font file, optionally gzip-compressed'
    )
    parser.add_argument(
        'text', nargs='?', default='',
        help='characters to show (default: all glyphs)'
    )
    parser.add_argument(
        '-c', '--codepoint', type=_int, action='append', default=[],
        help='glyph index to show, may be repeated'
    )
    parser.add_argument(
        '--info', action='store_true', default=False,
        help='show font properties'
    )
    parser.add_argument(
        '--columns', default=16, type=int,
        help='number of glyphs per line of output'
    )
    parser.add_argument(
        '--padding', default=1, type=int,
        help='number of characters between glyphs'
    )
    parser.add_argument(
        '--ink', default='@', type=_char,
        help='character to show inked pixels'
    )
    parser.add_argument(
        '--paper', default='.', type=_char,
        help='character to show blank pixels'
    )
    parser.add_argument(
        '--image', default=None, metavar='OUTFILE',
        help='save glyphs to image file instead of printing them'
    )
    parser.add_argument(
        '--debug', action='store_true', default=False,
        help='enable debugging output'
    )
    parser.add_argument(
        '--version', action='version', version=f'psfont v{psfont.__version__}'
    )
    return parser


def info(font):
    """Font properties as text."""
    return ''.join(
        f'{_name}: {_value}\n'
        for _name, _value in (
            ('version', f'PSF{font.version}'),
            ('glyphs', font.glyph_count),
            ('width', font.width),
            ('height', font.height),
            ('row-bytes', font.row_byte_width),
            ('data-offset', font.data_offset),
            ('unicode-table', 'yes' if font.has_unicode_table else 'no'),
        )
    )


def main(argv=None):
    args = get_parser().parse_args(argv)
    with wrap_main(args.debug):
        font = psfont.load(args.infile)
        logging.debug('Loaded %r', font)
        codes = [*args.text, *args.codepoint] or None
        if args.info:
            sys.stdout.write(info(font))
            if not codes:
                return
        if args.image:
            img = chart_image(
                font, codes, columns=args.columns, padding=args.padding
            )
            img.save(args.image)
        else:
            sys.stdout.write(chart(
                font, codes, columns=args.columns, padding=args.padding,
                ink=args.ink, paper=args.paper,
            ))


if __name__ == '__main__':
    main()
