"""
psfont.chart - chart of font glyphs

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging

from .base.image import levels_to_image

# matrix values in a chart
BORDER, PAPER, INK = 0, 1, 2


def chart_matrix(font, codes=None, *, columns=16, padding=1):
    """
    Place glyphs side by side in a matrix of BORDER, PAPER and INK values.

    codes: glyph indices or characters to include (default: all glyphs in font)
    columns: number of glyphs per line of the chart (default: 16)
    padding: number of border pixels between glyphs, in both directions (default: 1)
    """
    if columns < 1:
        raise ValueError(f'`columns` must be at least 1, not {columns}')
    if padding < 0:
        raise ValueError(f'`padding` must not be negative, not {padding}')
    if codes is None:
        codes = range(font.glyph_count)
    glyphs = []
    for code in codes:
        glyph = font.get_glyph(code)
        if glyph is None:
            logging.debug('No glyph for %r, skipped in chart.', code)
            continue
        glyphs.append(glyph.as_matrix(ink=INK, paper=PAPER))
    if not glyphs:
        return ()
    per_line = min(columns, len(glyphs))
    line_width = per_line * font.width + (per_line - 1) * padding
    separator = (BORDER,) * padding
    rows = []
    for start in range(0, len(glyphs), columns):
        strip = glyphs[start:start+columns]
        if start:
            rows.extend([(BORDER,) * line_width] * padding)
        for y in range(font.height):
            row = list(strip[0][y])
            for glyph in strip[1:]:
                row.extend(separator)
                row.extend(glyph[y])
            # last line may hold fewer glyphs
            row.extend((BORDER,) * (line_width - len(row)))
            rows.append(tuple(row))
    return tuple(rows)


def chart(
        font, codes=None, *,
        columns=16, padding=1, border=' ', ink='@', paper='.',
    ):
    """
    Draw glyphs side by side as text.

    codes: glyph indices or characters to include (default: all glyphs in font)
    columns: number of glyphs per line of the chart (default: 16)
    padding: number of border characters between glyphs (default: 1)
    border: character to use between glyphs (default: space)
    ink: character to use for inked pixels (default: @)
    paper: character to use for blank pixels (default: .)
    """
    matrix = chart_matrix(font, codes, columns=columns, padding=padding)
    levels = {BORDER: border, PAPER: paper, INK: ink}
    return ''.join(
        ''.join(levels[_pix] for _pix in _row) + '\n'
        for _row in matrix
    )


def chart_image(
        font, codes=None, *,
        columns=16, padding=1,
        border=(32, 32, 32), paper=(0, 0, 0), ink=(255, 255, 255),
    ):
    """Draw glyphs side by side to a PIL image."""
    matrix = chart_matrix(font, codes, columns=columns, padding=padding)
    return levels_to_image(matrix, (border, paper, ink))
