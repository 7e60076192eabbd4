from __future__ import annotations

import argparse
import logging
import math

from termplot import line_chart
from termplot.trace import close_trace_log, open_trace_log


def build_chart(width: int, height: int, mode: str, steps: int):
    chart = line_chart(width=width, height=height, mode=mode)
    chart.set_series("cos", [math.cos(i / 6.0) for i in range(steps)], color=(255, 170, 70, 255))
    chart.set_series("sin", [math.sin(i / 6.0) for i in range(steps)], color=(90, 190, 255, 255))
    return chart


def main() -> None:
    parser = argparse.ArgumentParser(description="Print a braille or dot line chart")
    parser.add_argument("--width", type=int, default=60)
    parser.add_argument("--height", type=int, default=14)
    parser.add_argument("--mode", choices=("braille", "dot"), default="braille")
    parser.add_argument("--steps", type=int, default=120)
    parser.add_argument("--trace", default=None, help="write layout trace lines to this file")
    args = parser.parse_args()

    chart = build_chart(args.width, args.height, args.mode, args.steps)
    logger: logging.Logger | None = None
    if args.trace:
        logger = open_trace_log(args.trace)
        chart.logger = logger
    print(chart.to_text())
    if logger is not None:
        close_trace_log(logger)


if __name__ == "__main__":
    main()
