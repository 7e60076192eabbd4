from __future__ import annotations

from typing import Mapping

from termplot.glyphs import BRAILLE_PAIRS, LEFT_SINGLE, RIGHT_SINGLE
from termplot.raster.cells import RGBA, Cell, CellBuffer, Rect
from termplot.scales import braille_position, clamp_position
from termplot.series import Series, line_color_for, non_empty


def render_braille(
    series: Mapping[str, Series],
    *,
    bottom: float,
    scale: float,
    area: Rect,
    label_y_space: int,
    line_colors: Mapping[str, RGBA],
    default_color: RGBA,
    background: RGBA,
) -> CellBuffer:
    """Plot every series two samples per column, newest at the right edge."""
    buf = CellBuffer()
    rows = area.height - 2
    if rows <= 0:
        return buf
    base_y = area.bottom - 2
    min_cell = area.x + label_y_space

    for s in non_empty(series):
        color = line_color_for(s.name, line_colors, default_color)
        values = s.values.tolist()

        def position(index: int) -> tuple[int, int]:
            b, m = braille_position(values[index], bottom, scale)
            return clamp_position(b, m, rows)

        column = area.right
        data_pos = len(values) - 1
        while data_pos >= 0 and column > min_cell:
            b0, m0 = position(data_pos)
            if data_pos > 0:
                b1, m1 = position(data_pos - 1)
                if b0 == b1:
                    buf.set(column, base_y - b0, Cell(glyph=BRAILLE_PAIRS[m1][m0], fg=color, bg=background))
                else:
                    buf.set(column, base_y - b0, Cell(glyph=RIGHT_SINGLE[m0], fg=color, bg=background))
                    buf.set(column, base_y - b1, Cell(glyph=LEFT_SINGLE[m1], fg=color, bg=background))
            else:
                buf.set(column, base_y - b0, Cell(glyph=RIGHT_SINGLE[m0], fg=color, bg=background))
            data_pos -= 2
            column -= 1
    return buf
