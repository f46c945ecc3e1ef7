"""Line-format parser.

Each non-blank line describes one signal:

    <name> | <edges>

Exactly one `|` per line. Name and edges are trimmed of spaces and tabs.
Edge characters (case-insensitive): `-` or space keep the level, `H`/`1`
high, `L`/`0` low, `Z` high impedance, `B` both. Blank lines are skipped;
every other line must be a signal.
"""

from __future__ import annotations

import logging
import re

from waveform_ascii.errors import IllegalEdgeCharacterError, MalformedLineError
from waveform_ascii.ir.sequence import Sequence
from waveform_ascii.types import Edge

logger = logging.getLogger(__name__)

_NEWLINE_RE = re.compile(r"\r\n|\n|\r")
_TRIM = " \t"
SEPARATOR = "|"


class LineParser:
    """Parses the `name | edges` line format into sequences."""

    def parse(self, src: str) -> list[Sequence]:
        sequences: list[Sequence] = []
        for line_no, line in enumerate(_NEWLINE_RE.split(src), start=1):
            stripped = line.strip(_TRIM)
            if not stripped:
                continue
            sequences.append(self._parse_line(line_no, line))
        logger.debug("parsed %d sequence(s)", len(sequences))
        return sequences

    def _parse_line(self, line_no: int, line: str) -> Sequence:
        separators = line.count(SEPARATOR)
        if separators == 0:
            raise MalformedLineError(line_no, line, "missing '|' separator")
        if separators > 1:
            raise MalformedLineError(line_no, line, "more than one '|' separator")

        name_raw, spec_raw = line.split(SEPARATOR)
        name = name_raw.strip(_TRIM)
        if not name:
            raise MalformedLineError(line_no, line, "missing signal name")

        spec = spec_raw.strip(_TRIM)
        # Columns are 1-based positions in the original line.
        spec_start = len(name_raw) + 1 + (len(spec_raw) - len(spec_raw.lstrip(_TRIM)))
        edges: list[Edge] = []
        for offset, c in enumerate(spec):
            try:
                edges.append(Edge.from_char(c))
            except IllegalEdgeCharacterError:
                raise IllegalEdgeCharacterError(c, line_no, spec_start + offset + 1) from None
        return Sequence(title=name, edges=tuple(edges))
