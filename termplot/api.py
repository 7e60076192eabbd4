from __future__ import annotations

from typing import Any

from termplot.chart import LineChart
from termplot.display import DEFAULT_MIN_HEIGHT, DEFAULT_MIN_WIDTH, resolve_default_canvas_size
from termplot.raster.cells import Rect


def line_chart(
    width: int | None = None,
    height: int | None = None,
    *,
    x: int = 0,
    y: int = 0,
    **kwargs: Any,
) -> LineChart:
    if width is None or height is None:
        default_w, default_h = resolve_default_canvas_size(min_width=DEFAULT_MIN_WIDTH, min_height=DEFAULT_MIN_HEIGHT)
        width = default_w if width is None else width
        height = default_h if height is None else height
    if width <= 0:
        raise ValueError("width must be > 0")
    if height <= 0:
        raise ValueError("height must be > 0")
    return LineChart(area=Rect(x=x, y=y, width=width, height=height), **kwargs)
