from __future__ import annotations

import math

from termplot.glyphs import SUB_LEVELS


def format_axis_value(value: float) -> str:
    """Format a y-axis tick value for the label margin.

    Two decimals by default, scientific notation once the integer part runs
    past three characters. Negative values always keep the fixed form.
    """
    out = f"{value:.2f}"
    if len(out) - 3 > 3:
        out = f"{value:.2e}"
    if value < 0:
        out = f"{value:.2f}"
    return out


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def braille_position(value: float, bottom: float, scale: float) -> tuple[int, int]:
    """Return ``(row, sub_level)`` of ``value`` on a braille plot.

    ``scale`` is the data span of one cell row; each row holds four
    sub-levels. A zero or non-finite scale puts every sample on the base
    sub-level of row 0.
    """
    if scale == 0 or not math.isfinite(scale):
        return (0, 0)
    cnt4 = round_half_up((value - bottom) / (scale / SUB_LEVELS))
    return (cnt4 // SUB_LEVELS, cnt4 % SUB_LEVELS)


def dot_row(value: float, bottom: float, scale: float) -> int:
    if scale == 0 or not math.isfinite(scale):
        return 0
    return round_half_up((value - bottom) / scale)


def clamp_position(row: int, sub_level: int, rows: int) -> tuple[int, int]:
    # Keeps out-of-range samples on the edge of the plot band.
    if row < 0:
        return (0, 0)
    if row >= rows:
        return (rows - 1, SUB_LEVELS - 1)
    return (row, sub_level)


def y_tick_values(bottom: float, top: float, count: int) -> list[float]:
    if count <= 0:
        return []
    span = top - bottom
    return [bottom + float(i) * span / float(count) for i in range(count)]
