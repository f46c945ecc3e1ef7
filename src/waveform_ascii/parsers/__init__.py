"""Parser entry point — turns source text into sequences."""

from __future__ import annotations

from waveform_ascii.ir.sequence import Sequence
from waveform_ascii.parsers.text import LineParser


def parse(src: str) -> list[Sequence]:
    """Parse the line format into sequences (lengths are not checked here)."""
    return LineParser().parse(src)
