from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

import math

from termplot.raster.draw_text import text_width
from termplot.scales import format_axis_value, y_tick_values
from termplot.series import ChartMode, Series, non_empty
from termplot.value_range import ValueRange


@dataclass(frozen=True)
class AxisLabel:
    text: str
    offset: int
    width: int


@dataclass(frozen=True)
class ChartLayout:
    """Per-pass geometry of the chart.

    ``x_labels`` offsets are columns right of the origin; ``y_labels``
    offsets are rows above the origin row.
    """

    bottom: float
    top: float
    scale: float
    axis_y_height: int
    axis_x_width: int
    label_y_space: int
    x_labels: tuple[AxisLabel, ...]
    y_labels: tuple[AxisLabel, ...]
    data_labels: tuple[str, ...]


def synthesize_data_labels(series: Mapping[str, Series]) -> tuple[str, ...]:
    for s in non_empty(series):
        return tuple(str(i) for i in range(len(s)))
    return ()


def observe_visible_extrema(
    series: Mapping[str, Series],
    value_range: ValueRange,
    *,
    columns: int,
    mode: ChartMode,
    padding: float,
    floor: float,
    ceil: float,
) -> None:
    value_range.clamp_to(floor, ceil)
    for s in non_empty(series):
        window = s.visible_window(columns, mode)
        if window.size == 0:
            continue
        value_range.observe(
            float(window.min()),
            float(window.max()),
            padding=padding,
            floor=floor,
            ceil=ceil,
        )


def layout_y_labels(
    bottom: float,
    top: float,
    axis_y_height: int,
    *,
    gap: int,
    formatter: Callable[[float], str] = format_axis_value,
) -> tuple[AxisLabel, ...]:
    count = max(0, (1 + axis_y_height) // (gap + 1))
    labels = []
    for i, value in enumerate(y_tick_values(bottom, top, count)):
        text = formatter(value)
        labels.append(AxisLabel(text=text, offset=i * (gap + 1), width=text_width(text)))
    return tuple(labels)


def layout_x_labels(
    data_labels: Sequence[str],
    axis_x_width: int,
    *,
    gap: int,
    mode: ChartMode,
) -> tuple[AxisLabel, ...]:
    # The label at cursor column l names the sample drawn l cells from the
    # origin: data_labels[l] in dot mode, data_labels[2 * l] in braille mode.
    stride = 2 if mode == "braille" else 1
    labels: list[AxisLabel] = []
    cursor = 0
    while cursor < axis_x_width:
        index = stride * cursor
        if index >= len(data_labels):
            break
        text = data_labels[index]
        width = text_width(text)
        if cursor + width <= axis_x_width:
            labels.append(AxisLabel(text=text, offset=cursor, width=width))
        cursor += max(1, width + gap)
    return tuple(labels)


def compute_layout(
    series: Mapping[str, Series],
    inner_width: int,
    inner_height: int,
    *,
    mode: ChartMode,
    value_range: ValueRange,
    y_padding: float = 0.2,
    y_floor: float = -math.inf,
    y_ceil: float = math.inf,
    x_label_gap: int = 2,
    y_label_gap: int = 1,
    data_labels: Sequence[str] | None = None,
    label_formatter: Callable[[float], str] = format_axis_value,
) -> ChartLayout:
    """Compute the value range, scale and both label sets for one pass.

    ``value_range`` is widened in place. Callers are expected to skip this
    when no series holds any sample; the range then stays fresh and the
    returned layout has no labels.
    """
    labels = tuple(data_labels) if data_labels else synthesize_data_labels(series)

    observe_visible_extrema(
        series,
        value_range,
        columns=inner_width,
        mode=mode,
        padding=y_padding,
        floor=y_floor,
        ceil=y_ceil,
    )

    axis_y_height = inner_height - 2
    if value_range.is_fresh:
        bottom, top = 0.0, 0.0
    else:
        bottom, top = value_range.as_tuple()
    scale = (top - bottom) / axis_y_height if axis_y_height > 0 else 0.0

    if value_range.is_fresh or inner_width <= 0:
        y_labels: tuple[AxisLabel, ...] = ()
    else:
        y_labels = layout_y_labels(bottom, top, axis_y_height, gap=y_label_gap, formatter=label_formatter)
    label_y_space = max((label.width for label in y_labels), default=0)

    axis_x_width = inner_width - 1 - label_y_space
    x_labels = layout_x_labels(labels, axis_x_width, gap=x_label_gap, mode=mode)

    return ChartLayout(
        bottom=bottom,
        top=top,
        scale=scale,
        axis_y_height=axis_y_height,
        axis_x_width=axis_x_width,
        label_y_space=label_y_space,
        x_labels=x_labels,
        y_labels=y_labels,
        data_labels=labels,
    )
