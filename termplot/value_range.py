from __future__ import annotations

from dataclasses import dataclass

import math


@dataclass
class ValueRange:
    """Y-axis extent that only widens as new extrema arrive.

    A fresh range is ``(+inf, -inf)`` so the first observation always
    claims both ends.
    """

    bottom: float = math.inf
    top: float = -math.inf

    def reset(self) -> None:
        self.bottom = math.inf
        self.top = -math.inf

    @property
    def is_fresh(self) -> bool:
        return math.isinf(self.bottom) and math.isinf(self.top) and self.bottom > self.top

    @property
    def span(self) -> float:
        if self.is_fresh:
            return 0.0
        return self.top - self.bottom

    def observe(
        self,
        lo: float,
        hi: float,
        *,
        padding: float,
        floor: float = -math.inf,
        ceil: float = math.inf,
    ) -> bool:
        """Widen the range to cover ``[lo, hi]`` and report whether it moved."""
        span = hi - lo
        changed = False
        if lo <= self.bottom:
            bottom = _clamp(lo - padding * span, floor, ceil)
            changed = changed or bottom != self.bottom
            self.bottom = bottom
        if hi >= self.top:
            top = _clamp(hi + padding * span, floor, ceil)
            changed = changed or top != self.top
            self.top = top
        return changed

    def clamp_to(self, floor: float, ceil: float) -> bool:
        """Pull a stored range back inside ``[floor, ceil]``; a fresh range is left alone."""
        if self.is_fresh:
            return False
        bottom = _clamp(self.bottom, floor, ceil)
        top = _clamp(self.top, floor, ceil)
        changed = (bottom, top) != (self.bottom, self.top)
        self.bottom, self.top = bottom, top
        return changed

    def as_tuple(self) -> tuple[float, float]:
        return (self.bottom, self.top)


def _clamp(value: float, floor: float, ceil: float) -> float:
    # floor > ceil is rejected by the chart setters; here ceil wins.
    return min(max(value, floor), ceil)
