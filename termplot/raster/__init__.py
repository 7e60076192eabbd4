from .cells import Cell, CellBuffer, Rect, draw_hline, draw_vline
from .draw_text import draw_text, text_width

__all__ = [
    "Cell",
    "CellBuffer",
    "Rect",
    "draw_hline",
    "draw_vline",
    "draw_text",
    "text_width",
]
