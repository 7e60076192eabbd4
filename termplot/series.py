from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping

import numpy as np

from termplot.adapters import normalize_samples
from termplot.raster.cells import RGBA


ChartMode = Literal["braille", "dot"]
CHART_MODES: tuple[str, ...] = ("braille", "dot")


@dataclass(frozen=True)
class Series:
    name: str
    values: np.ndarray

    @classmethod
    def from_values(cls, name: str, values: Any) -> "Series":
        arr = normalize_samples(values, label=f"series {name!r}")
        arr.setflags(write=False)
        return cls(name=name, values=arr)

    def __len__(self) -> int:
        return int(self.values.size)

    def appended(self, values: Any, *, max_history: int | None = None) -> "Series":
        extra = normalize_samples(values, label=f"series {self.name!r}")
        merged = np.concatenate([self.values, extra])
        if max_history is not None and merged.size > max_history:
            merged = merged[-max_history:]
        merged.setflags(write=False)
        return Series(name=self.name, values=merged)

    def visible_window(self, columns: int, mode: ChartMode) -> np.ndarray:
        """Trailing samples that fit ``columns`` cells in ``mode``."""
        capacity = max(0, columns) * (2 if mode == "braille" else 1)
        if capacity <= 0:
            return self.values[:0]
        return self.values[-capacity:]


def sorted_series(series: Mapping[str, Series]) -> list[Series]:
    """Draw order: lexicographic by name, so later names win overlapping cells."""
    return [series[name] for name in sorted(series)]


def non_empty(series: Mapping[str, Series]) -> list[Series]:
    return [s for s in sorted_series(series) if len(s) > 0]


def line_color_for(name: str, line_colors: Mapping[str, RGBA], default: RGBA) -> RGBA:
    return line_colors.get(name, default)
