from __future__ import annotations

import logging
from pathlib import Path


TRACE_FORMAT = "%(asctime)s.%(msecs)03d %(message)s"
TRACE_DATEFMT = "%b %d %H:%M:%S"


def open_trace_log(path: str | Path, *, name: str = "termplot.trace") -> logging.Logger:
    """Return a logger writing timestamped lines to ``path``.

    The file is truncated on open. Pass the logger to ``LineChart(logger=...)``
    and release it with :func:`close_trace_log`.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger(name)
    close_trace_log(logger)
    handler = logging.FileHandler(target, mode="w", encoding="utf-8")
    handler.setFormatter(logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATEFMT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger


def close_trace_log(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()
