from termplot.api import line_chart
from termplot.chart import LineChart
from termplot.errors import PlotDataError
from termplot.layout import AxisLabel, ChartLayout, compute_layout
from termplot.raster import Cell, CellBuffer, Rect
from termplot.scales import format_axis_value
from termplot.value_range import ValueRange

__all__ = [
    "AxisLabel",
    "Cell",
    "CellBuffer",
    "ChartLayout",
    "LineChart",
    "PlotDataError",
    "Rect",
    "ValueRange",
    "compute_layout",
    "format_axis_value",
    "line_chart",
]
