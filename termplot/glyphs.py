"""Braille glyph codebook for two-sample cells.

A braille cell is a 2 (wide) x 4 (tall) dot matrix. The chart packs two
consecutive samples into one cell: the older sample in the left dot column,
the newer one in the right dot column. Sub-level 0 is the bottom dot row.
"""

from __future__ import annotations

from typing import Final


SUB_LEVELS: Final[int] = 4

# BRAILLE_PAIRS[m_older][m_newer]
BRAILLE_PAIRS: Final[tuple[tuple[str, str, str, str], ...]] = (
    ("⣀", "⡠", "⡐", "⡈"),
    ("⢄", "⠤", "⠔", "⠌"),
    ("⢂", "⠢", "⠒", "⠊"),
    ("⢁", "⠡", "⠑", "⠉"),
)

LEFT_SINGLE: Final[tuple[str, str, str, str]] = ("⡀", "⠄", "⠂", "⠁")
RIGHT_SINGLE: Final[tuple[str, str, str, str]] = ("⢀", "⠠", "⠐", "⠈")


def pair_glyph(m_older: int, m_newer: int) -> str:
    return BRAILLE_PAIRS[m_older][m_newer]


def left_glyph(m: int) -> str:
    return LEFT_SINGLE[m]


def right_glyph(m: int) -> str:
    return RIGHT_SINGLE[m]
