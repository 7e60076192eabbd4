from __future__ import annotations

import shutil


DEFAULT_FALLBACK_SIZE = (80, 24)
DEFAULT_MIN_WIDTH = 10
DEFAULT_MIN_HEIGHT = 4


def resolve_default_canvas_size(
    *,
    min_width: int = DEFAULT_MIN_WIDTH,
    min_height: int = DEFAULT_MIN_HEIGHT,
) -> tuple[int, int]:
    """Size of the controlling terminal in cells, or 80x24 when unknown."""
    if min_width <= 0 or min_height <= 0:
        raise ValueError("min_width/min_height must be > 0")

    size = _detect_terminal_size()
    if size is None:
        size = DEFAULT_FALLBACK_SIZE
    cols, rows = size
    return (max(cols, min_width), max(rows, min_height))


def _detect_terminal_size() -> tuple[int, int] | None:
    cols, rows = shutil.get_terminal_size(fallback=(0, 0))
    if cols > 0 and rows > 0:
        return (int(cols), int(rows))
    return None
