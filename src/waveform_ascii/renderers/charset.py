"""Glyph sets and transition tables for waveform drawing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Grid-eligible cell: drawn as the grid glyph when the grid is on, else a space.
BLANK = None

# [Keep][Keep] is never looked up; the previous state is never Keep.
UNREACHABLE = "X"

Cell = str | None
Table = tuple[tuple[Cell, ...], ...]


class GlyphSet(Enum):
    Unicode = "unicode"
    Ascii = "ascii"


_ = BLANK
X = UNREACHABLE

# Rows are the current edge, columns the previous visual state, both in
# Edge order: Keep, High, Low, HighImpedance, Both.
# fmt: off
_UNICODE_TOP: Table = (
    # -  H    L    Z    B
    (X, "━", _,   _,   "━"),  # -
    (X, "━", "┏", "┏", "┳"),  # H
    (X, "┓", _,   _,   "┓"),  # L
    (X, "┓", _,   _,   "┓"),  # Z
    (X, "┳", "┏", "┏", "┳"),  # B
)

_UNICODE_MIDDLE: Table = (
    # -  H    L    Z    B
    (X, _,   _,   "━", " "),  # -
    (X, _,   "┃", "┛", "┃"),  # H
    (X, "┃", _,   "┓", "┃"),  # L
    (X, "┗", "┏", "━", "┣"),  # Z
    (X, "┃", "┃", "┫", "┃"),  # B
)

_UNICODE_BOTTOM: Table = (
    # -  H    L    Z    B
    (X, _,   "━", _,   "━"),  # -
    (X, _,   "┛", _,   "┛"),  # H
    (X, "┗", "━", "┗", "┻"),  # L
    (X, _,   "┛", _,   "┛"),  # Z
    (X, "┗", "┻", "┗", "┻"),  # B
)
# fmt: on

del _, X

# Same junction shapes in plain ASCII.
_ASCII_MAP = str.maketrans(
    {
        "━": "-",
        "┃": "|",
        "┏": ".",
        "┓": ".",
        "┗": "'",
        "┛": "'",
        "┳": "+",
        "┻": "+",
        "┣": "+",
        "┫": "+",
    }
)


def _to_ascii(table: Table) -> Table:
    return tuple(tuple(cell if cell is None else cell.translate(_ASCII_MAP) for cell in row) for row in table)


@dataclass(frozen=True)
class Glyphs:
    """All the strings needed to draw one signal block."""

    phase_out: str
    keep_level: str
    grid: str
    top: Table
    middle: Table
    bottom: Table

    @classmethod
    def unicode(cls) -> Glyphs:
        return UNICODE_GLYPHS

    @classmethod
    def ascii(cls) -> Glyphs:
        return ASCII_GLYPHS

    @classmethod
    def for_glyph_set(cls, gs: GlyphSet) -> Glyphs:
        if gs == GlyphSet.Unicode:
            return cls.unicode()
        return cls.ascii()


UNICODE_GLYPHS = Glyphs(
    phase_out="╍╍",
    keep_level="━━",
    grid="┆",
    top=_UNICODE_TOP,
    middle=_UNICODE_MIDDLE,
    bottom=_UNICODE_BOTTOM,
)

ASCII_GLYPHS = Glyphs(
    phase_out="--",
    keep_level="--",
    grid=".",
    top=_to_ascii(_UNICODE_TOP),
    middle=_to_ascii(_UNICODE_MIDDLE),
    bottom=_to_ascii(_UNICODE_BOTTOM),
)
