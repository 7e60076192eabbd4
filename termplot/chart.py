from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Any, Callable, Sequence

import numpy as np

from termplot.axes import DEFAULT_AXIS_GLYPHS, AxisGlyphs, plot_axes
from termplot.braille import render_braille
from termplot.dots import DEFAULT_DOT_GLYPH, render_dots
from termplot.layout import ChartLayout, compute_layout
from termplot.raster import CellBuffer, Rect, text_width
from termplot.raster.cells import RGBA
from termplot.scales import format_axis_value
from termplot.series import CHART_MODES, ChartMode, Series, non_empty
from termplot.style.theme import DEFAULT_TOKENS, ThemeTokens, hex_to_rgba
from termplot.value_range import ValueRange


LOGGER = logging.getLogger(__name__)


@dataclass
class LineChart:
    """Line chart over a fixed cell rectangle.

    Braille mode (default) packs two samples per column; dot mode draws one
    marker per column. The y range widens as new extrema scroll into view and
    never shrinks until :meth:`reset_value_range` is called.

    Not thread-safe: mutate series between :meth:`render` calls only.
    """

    area: Rect
    mode: ChartMode = "braille"
    background: RGBA = field(default_factory=lambda: hex_to_rgba(DEFAULT_TOKENS.background))
    axes_color: RGBA = field(default_factory=lambda: hex_to_rgba(DEFAULT_TOKENS.axes_fg))
    default_line_color: RGBA = field(default_factory=lambda: hex_to_rgba(DEFAULT_TOKENS.line_fg))
    line_colors: dict[str, RGBA] = field(default_factory=dict)
    dot_glyph: str = DEFAULT_DOT_GLYPH
    y_padding: float = 0.2
    y_floor: float = -math.inf
    y_ceil: float = math.inf
    x_label_gap: int = 2
    y_label_gap: int = 1
    data_labels: tuple[str, ...] | None = None
    label_formatter: Callable[[float], str] = format_axis_value
    axis_glyphs: AxisGlyphs = DEFAULT_AXIS_GLYPHS
    max_history: int | None = None
    logger: logging.Logger | None = None

    _series: dict[str, Series] = field(default_factory=dict)
    _value_range: ValueRange = field(default_factory=ValueRange)
    _last_layout: ChartLayout | None = None

    def __post_init__(self) -> None:
        _check_mode(self.mode)
        _check_padding(self.y_padding)
        _check_limits(self.y_floor, self.y_ceil)
        _check_gap(self.x_label_gap, "x_label_gap")
        _check_gap(self.y_label_gap, "y_label_gap")
        _check_dot_glyph(self.dot_glyph)
        if self.max_history is not None and self.max_history <= 0:
            raise ValueError("max_history must be > 0")
        if self.data_labels is not None:
            self.data_labels = tuple(str(label) for label in self.data_labels)

    @classmethod
    def from_theme(cls, area: Rect, tokens: ThemeTokens = DEFAULT_TOKENS, **kwargs: Any) -> "LineChart":
        return cls(
            area=area,
            background=hex_to_rgba(tokens.background),
            axes_color=hex_to_rgba(tokens.axes_fg),
            default_line_color=hex_to_rgba(tokens.line_fg),
            **kwargs,
        )

    @property
    def _log(self) -> logging.Logger:
        return self.logger if self.logger is not None else LOGGER

    # series

    def set_series(self, name: str, values: Any, *, color: RGBA | None = None) -> "LineChart":
        series = Series.from_values(name, values)
        if self.max_history is not None and len(series) > self.max_history:
            series = Series.from_values(name, series.values[-self.max_history :])
        self._series[name] = series
        if color is not None:
            self.line_colors[name] = color
        return self

    def append(self, name: str, *values: float) -> "LineChart":
        current = self._series.get(name)
        if current is None:
            current = Series.from_values(name, [])
        self._series[name] = current.appended(list(values), max_history=self.max_history)
        return self

    def remove_series(self, name: str) -> "LineChart":
        self._series.pop(name, None)
        self.line_colors.pop(name, None)
        return self

    def clear(self) -> "LineChart":
        self._series.clear()
        return self

    def series_names(self) -> list[str]:
        return sorted(self._series)

    def series_values(self, name: str) -> np.ndarray:
        return self._series[name].values

    # configuration

    def set_mode(self, mode: str) -> "LineChart":
        _check_mode(mode)
        self.mode = mode  # type: ignore[assignment]
        return self

    def set_y_limits(self, *, floor: float | None = None, ceil: float | None = None) -> "LineChart":
        new_floor = self.y_floor if floor is None else float(floor)
        new_ceil = self.y_ceil if ceil is None else float(ceil)
        _check_limits(new_floor, new_ceil)
        self.y_floor = new_floor
        self.y_ceil = new_ceil
        self._value_range.clamp_to(new_floor, new_ceil)
        return self

    def set_y_padding(self, padding: float) -> "LineChart":
        _check_padding(padding)
        self.y_padding = float(padding)
        return self

    def set_label_gaps(self, *, x: int | None = None, y: int | None = None) -> "LineChart":
        if x is not None:
            _check_gap(x, "x_label_gap")
            self.x_label_gap = int(x)
        if y is not None:
            _check_gap(y, "y_label_gap")
            self.y_label_gap = int(y)
        return self

    def set_data_labels(self, labels: Sequence[str] | None) -> "LineChart":
        self.data_labels = None if labels is None else tuple(str(label) for label in labels)
        return self

    def set_line_color(self, name: str, color: RGBA | None) -> "LineChart":
        if color is None:
            self.line_colors.pop(name, None)
        else:
            self.line_colors[name] = color
        return self

    def set_dot_glyph(self, glyph: str) -> "LineChart":
        _check_dot_glyph(glyph)
        self.dot_glyph = glyph
        return self

    def set_area(self, area: Rect) -> "LineChart":
        self.area = area
        return self

    def reset_value_range(self) -> "LineChart":
        self._value_range.reset()
        return self

    @property
    def value_range(self) -> tuple[float, float]:
        return self._value_range.as_tuple()

    def last_layout(self) -> ChartLayout | None:
        return self._last_layout

    # rendering

    def render(self) -> CellBuffer:
        buf = CellBuffer()
        if not non_empty(self._series):
            self._log.debug("render skipped: no series data")
            self._last_layout = None
            return buf

        layout = compute_layout(
            self._series,
            self.area.width,
            self.area.height,
            mode=self.mode,
            value_range=self._value_range,
            y_padding=self.y_padding,
            y_floor=self.y_floor,
            y_ceil=self.y_ceil,
            x_label_gap=self.x_label_gap,
            y_label_gap=self.y_label_gap,
            data_labels=self.data_labels,
            label_formatter=self.label_formatter,
        )
        self._last_layout = layout
        self._log.debug(
            "layout bottom=%f top=%f scale=%f axis_y_height=%d label_y_space=%d",
            layout.bottom,
            layout.top,
            layout.scale,
            layout.axis_y_height,
            layout.label_y_space,
        )

        buf.merge(
            plot_axes(
                layout,
                self.area,
                color=self.axes_color,
                background=self.background,
                glyphs=self.axis_glyphs,
            )
        )

        common = dict(
            bottom=layout.bottom,
            scale=layout.scale,
            area=self.area,
            label_y_space=layout.label_y_space,
            line_colors=self.line_colors,
            default_color=self.default_line_color,
            background=self.background,
        )
        if self.mode == "dot":
            self._log.debug("render dot mode")
            buf.merge(render_dots(self._series, glyph=self.dot_glyph, **common))
        else:
            self._log.debug("render braille mode")
            buf.merge(render_braille(self._series, **common))
        return buf.clipped(self.area)

    def to_text(self, fill: str = " ") -> str:
        return "\n".join(self.render().to_lines(self.area, fill=fill))


def _check_mode(mode: str) -> None:
    if mode not in CHART_MODES:
        raise ValueError(f"unsupported chart mode: {mode!r}")


def _check_padding(padding: float) -> None:
    if not math.isfinite(padding) or padding < 0:
        raise ValueError("y_padding must be a finite number >= 0")


def _check_limits(floor: float, ceil: float) -> None:
    if math.isnan(floor) or math.isnan(ceil):
        raise ValueError("y limits must not be NaN")
    if floor > ceil:
        raise ValueError("y_floor must be <= y_ceil")


def _check_gap(gap: int, name: str) -> None:
    if int(gap) < 0:
        raise ValueError(f"{name} must be >= 0")


def _check_dot_glyph(glyph: str) -> None:
    if len(glyph) != 1 or text_width(glyph) != 1:
        raise ValueError("dot_glyph must be a single one-cell character")
