from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from termplot.errors import PlotDataError


def normalize_samples(values: Any, *, label: str = "series") -> np.ndarray:
    """Coerce ``values`` into a finite 1-D float64 array, oldest sample first."""
    arr = _coerce_1d_numeric(values, label=label)
    if arr.size and not np.all(np.isfinite(arr)):
        bad = int(np.flatnonzero(~np.isfinite(arr))[0])
        raise PlotDataError(f"{label} contains a non-finite value at index {bad}")
    return arr


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        items = list(value)
        arr = np.empty(len(items), dtype=object)
        for i, item in enumerate(items):
            if isinstance(item, (Sequence, np.ndarray)) and not isinstance(item, (str, bytes)):
                raise PlotDataError(f"{label} must be 1-D")
            arr[i] = item
        return _coerce_ndarray(arr, label=label)

    if isinstance(value, (int, float, Decimal, np.number)) and not isinstance(value, bool):
        return _coerce_ndarray(np.asarray([value], dtype=object), label=label)

    raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return np.array(arr, dtype=np.float64)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None or isinstance(raw, (str, bytes)):
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
