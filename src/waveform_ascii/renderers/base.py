"""Base renderer protocol."""

from __future__ import annotations

from collections.abc import Sequence as SequenceList
from typing import Protocol, TextIO

from waveform_ascii.ir.sequence import Sequence


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, sequences: SequenceList[Sequence]) -> str:
        """Render a set of equal-length sequences to an output string."""
        ...

    def write(self, sequences: SequenceList[Sequence], sink: TextIO) -> None:
        """Render a set of equal-length sequences line by line into `sink`."""
        ...
