from __future__ import annotations

import wcwidth

from termplot.raster.cells import RGBA, Cell, CellBuffer


def char_width(ch: str) -> int:
    # Control and combining characters still take one cell on the chart.
    return max(1, wcwidth.wcwidth(ch))


def text_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def draw_text(dst: CellBuffer, x: int, y: int, text: str, fg: RGBA, bg: RGBA) -> int:
    """Write ``text`` left to right starting at ``(x, y)``; return columns used."""
    offset = 0
    for ch in text:
        dst.set(x + offset, y, Cell(glyph=ch, fg=fg, bg=bg))
        offset += char_width(ch)
    return offset
