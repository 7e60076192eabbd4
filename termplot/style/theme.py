from __future__ import annotations

from dataclasses import asdict, dataclass
import re
from typing import Any, Mapping

from termplot.raster.cells import RGBA

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")


@dataclass(frozen=True)
class ThemeTokens:
    """Colour tokens for line charts."""

    background: str = "#0C1017"
    axes_fg: str = "#7C8A9C"
    line_fg: str = "#3E95FF"


DEFAULT_TOKENS = ThemeTokens()


def validate_theme_tokens(overrides: Mapping[str, Any] | None = None) -> ThemeTokens:
    """Validate and merge user token overrides against the defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_TOKENS)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown theme token: {key}")
            raw[key] = value

    for key in ("background", "axes_fg", "line_fg"):
        if not isinstance(raw[key], str) or not _HEX_COLOR.match(raw[key]):
            raise ValueError(f"Token `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    return ThemeTokens(
        background=str(raw["background"]),
        axes_fg=str(raw["axes_fg"]),
        line_fg=str(raw["line_fg"]),
    )


def hex_to_rgba(value: str) -> RGBA:
    if not _HEX_COLOR.match(value):
        raise ValueError(f"not a hex color: {value!r}")
    r = int(value[1:3], 16)
    g = int(value[3:5], 16)
    b = int(value[5:7], 16)
    a = int(value[7:9], 16) if len(value) == 9 else 255
    return (r, g, b, a)
