from __future__ import annotations

from typing import Mapping

from termplot.raster.cells import RGBA, Cell, CellBuffer, Rect
from termplot.scales import dot_row
from termplot.series import Series, line_color_for, non_empty


DEFAULT_DOT_GLYPH = "•"


def render_dots(
    series: Mapping[str, Series],
    *,
    bottom: float,
    scale: float,
    area: Rect,
    label_y_space: int,
    line_colors: Mapping[str, RGBA],
    default_color: RGBA,
    background: RGBA,
    glyph: str = DEFAULT_DOT_GLYPH,
) -> CellBuffer:
    buf = CellBuffer()
    rows = area.height - 2
    if rows <= 0:
        return buf
    base_y = area.bottom - 2
    min_cell = area.x + label_y_space

    for s in non_empty(series):
        cell = Cell(glyph=glyph, fg=line_color_for(s.name, line_colors, default_color), bg=background)
        column = area.right
        for value in reversed(s.values.tolist()):
            if column <= min_cell:
                break
            row = min(max(dot_row(value, bottom, scale), 0), rows - 1)
            buf.set(column, base_y - row, cell)
            column -= 1
    return buf
