from __future__ import annotations

from dataclasses import dataclass

from termplot.layout import ChartLayout
from termplot.raster.cells import RGBA, Cell, CellBuffer, Rect, draw_hline, draw_vline
from termplot.raster.draw_text import draw_text


@dataclass(frozen=True)
class AxisGlyphs:
    origin: str = "└"
    horizontal: str = "┈"
    vertical: str = "┊"


DEFAULT_AXIS_GLYPHS = AxisGlyphs()


def plot_axes(
    layout: ChartLayout,
    area: Rect,
    *,
    color: RGBA,
    background: RGBA,
    glyphs: AxisGlyphs = DEFAULT_AXIS_GLYPHS,
) -> CellBuffer:
    """Draw the origin, both dashed axis lines and the precomputed labels."""
    buf = CellBuffer()
    if area.height < 2 or area.width < 1:
        return buf

    orig_x = area.x + layout.label_y_space
    orig_y = area.bottom - 1

    buf.set(orig_x, orig_y, Cell(glyph=glyphs.origin, fg=color, bg=background))
    if layout.axis_x_width > 1:
        draw_hline(buf, orig_x + 1, orig_x + layout.axis_x_width - 1, orig_y, Cell(glyph=glyphs.horizontal, fg=color, bg=background))
    if layout.axis_y_height > 0:
        draw_vline(buf, orig_x, orig_y - layout.axis_y_height, orig_y - 1, Cell(glyph=glyphs.vertical, fg=color, bg=background))

    label_row = area.bottom
    for label in layout.x_labels:
        if label.offset + label.width > layout.axis_x_width:
            break
        draw_text(buf, orig_x + label.offset, label_row, label.text, color, background)

    for label in layout.y_labels:
        draw_text(buf, area.x, orig_y - label.offset, label.text, color, background)

    return buf
