from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


RGBA = tuple[int, int, int, int]

DEFAULT_BACKGROUND: RGBA = (12, 16, 23, 255)


@dataclass(frozen=True)
class Rect:
    """Cell rectangle with an inclusive origin and exclusive far edges."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("rect width/height must be >= 0")

    @property
    def right(self) -> int:
        # Last column inside the rect.
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        # Last row inside the rect.
        return self.y + self.height - 1

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x <= self.right and self.y <= y <= self.bottom


@dataclass(frozen=True)
class Cell:
    glyph: str
    fg: RGBA
    bg: RGBA = DEFAULT_BACKGROUND


class CellBuffer:
    """Sparse grid of cells keyed by ``(x, y)``; later writes replace earlier ones."""

    def __init__(self) -> None:
        self._cells: dict[tuple[int, int], Cell] = {}

    def set(self, x: int, y: int, cell: Cell) -> None:
        self._cells[(int(x), int(y))] = cell

    def get(self, x: int, y: int) -> Cell | None:
        return self._cells.get((int(x), int(y)))

    def merge(self, other: "CellBuffer") -> "CellBuffer":
        self._cells.update(other._cells)
        return self

    def clipped(self, area: Rect) -> "CellBuffer":
        out = CellBuffer()
        out._cells = {key: cell for key, cell in self._cells.items() if area.contains(*key)}
        return out

    def items(self) -> Iterator[tuple[tuple[int, int], Cell]]:
        return iter(sorted(self._cells.items()))

    def bounds(self) -> Rect | None:
        if not self._cells:
            return None
        xs = [x for x, _ in self._cells]
        ys = [y for _, y in self._cells]
        x0, y0 = min(xs), min(ys)
        return Rect(x=x0, y=y0, width=max(xs) - x0 + 1, height=max(ys) - y0 + 1)

    def to_lines(self, area: Rect, fill: str = " ") -> list[str]:
        lines: list[str] = []
        for y in range(area.y, area.y + area.height):
            row = []
            for x in range(area.x, area.x + area.width):
                cell = self._cells.get((x, y))
                row.append(fill if cell is None else cell.glyph)
            lines.append("".join(row))
        return lines

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, key: object) -> bool:
        return key in self._cells

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellBuffer):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"CellBuffer(cells={len(self._cells)})"


def draw_hline(dst: CellBuffer, x0: int, x1: int, y: int, cell: Cell) -> None:
    for x in range(min(x0, x1), max(x0, x1) + 1):
        dst.set(x, y, cell)


def draw_vline(dst: CellBuffer, x: int, y0: int, y1: int, cell: Cell) -> None:
    for y in range(min(y0, y1), max(y0, y1) + 1):
        dst.set(x, y, cell)
