"""Shared type definitions for waveform-ascii.

Enums used across the parser, the sequence model and the renderers.
"""

from __future__ import annotations

from enum import Enum

from waveform_ascii.errors import IllegalEdgeCharacterError


class Edge(Enum):
    # Values double as transition table indices.
    Keep = 0  # - or space
    High = 1  # H, 1
    Low = 2  # L, 0
    HighImpedance = 3  # Z
    Both = 4  # B

    @classmethod
    def from_char(cls, c: str) -> Edge:
        """Map one input character to an Edge (case-insensitive)."""
        edge = _CHAR_MAP.get(c.upper())
        if edge is None:
            raise IllegalEdgeCharacterError(c)
        return edge


_CHAR_MAP: dict[str, Edge] = {
    "-": Edge.Keep,
    " ": Edge.Keep,
    "H": Edge.High,
    "1": Edge.High,
    "L": Edge.Low,
    "0": Edge.Low,
    "Z": Edge.HighImpedance,
    "B": Edge.Both,
}


class Row(Enum):
    """The three lanes drawn per signal, in emission order."""

    Top = 0
    Middle = 1
    Bottom = 2
