"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from waveform_ascii.ir.sequence import Sequence


class Parser(Protocol):
    """Protocol that all input parsers must implement."""

    def parse(self, src: str) -> list[Sequence]:
        """Parse source text into named edge sequences."""
        ...
