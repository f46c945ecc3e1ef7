"""Timing-diagram text renderer.

Lays out validated sequences against a shared time axis. `CLK | HHLL`
renders as:

          0  1  2  3
          ┆  ┆  ┆  ┆
        ╍╍━━━━━━┓  ┆
    CLK   ┆  ┆  ┃  ┆
          ┆  ┆  ┗━━━╍╍
          ┆  ┆  ┆  ┆

Signal rows have a gutter of title width + 1; axis and separator rows are
shifted by the 2-column leading stub so every marker lines up with its
step's glyph. Steps are 3 columns apart (glyph + 2-column spacer).
"""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Iterator
from collections.abc import Sequence as SequenceList
from typing import TextIO

from waveform_ascii.config import RenderConfig
from waveform_ascii.ir.sequence import Sequence, validate_sequences
from waveform_ascii.renderers.charset import Glyphs
from waveform_ascii.renderers.transitions import render_row
from waveform_ascii.types import Row

logger = logging.getLogger(__name__)

STEP_SEPARATOR = "  "
STUB_WIDTH = 2


def _column_line(indent: int, markers: list[str]) -> str:
    return " " * indent + STEP_SEPARATOR.join(markers)


def time_axis_rows(steps: int, placeholder: str) -> list[str]:
    """Header cells for every step, most significant digit row first.

    One row per decimal digit of the highest step index. Rows above the
    ones row only label every 10th column, and only where that place is
    significant; other columns hold `placeholder`.
    """
    digits = len(str(max(steps - 1, 0)))
    rows: list[str] = []
    for k in range(digits - 1, 0, -1):
        place = 10**k
        cells = [str((i // place) % 10) if i % 10 == 0 and i >= place else placeholder for i in range(steps)]
        rows.append(STEP_SEPARATOR.join(cells))
    rows.append(STEP_SEPARATOR.join(str(i % 10) for i in range(steps)))
    return rows


class WaveformRenderer:
    """Renders sequences as a glyph timing diagram."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config if config is not None else RenderConfig()
        self.glyphs = Glyphs.for_glyph_set(self.config.glyph_set)

    def render(self, sequences: SequenceList[Sequence]) -> str:
        buf = io.StringIO()
        self.write(sequences, buf)
        return buf.getvalue()

    def write(self, sequences: SequenceList[Sequence], sink: TextIO) -> None:
        """Validate, then write the diagram into `sink` one line at a time.

        Nothing is written when validation fails. Errors raised by the sink
        propagate unchanged and may leave partial output behind.
        """
        steps = validate_sequences(sequences)
        logger.debug("rendering %d signal(s) over %d step(s)", len(sequences), steps)
        for line in self.lines(sequences, steps):
            sink.write(line + "\n")

    def lines(self, sequences: SequenceList[Sequence], steps: int) -> Iterator[str]:
        title_width = max(len(seq.title) for seq in sequences)
        axis_indent = title_width + 1 + STUB_WIDTH
        grid = self.glyphs.grid if self.config.show_grid else " "

        if self.config.show_time_axis:
            for row in time_axis_rows(steps, grid):
                yield " " * axis_indent + row

        separator = _column_line(axis_indent, [grid] * steps)
        yield separator
        for seq in sequences:
            yield from self._signal_block(seq, title_width)
            yield separator

    def _signal_block(self, seq: Sequence, title_width: int) -> Iterator[str]:
        show_grid = self.config.show_grid
        gutter = " " * (title_width + 1)
        yield gutter + render_row(seq, Row.Top, self.glyphs, show_grid)
        yield seq.title.rjust(title_width) + " " + render_row(seq, Row.Middle, self.glyphs, show_grid)
        yield gutter + render_row(seq, Row.Bottom, self.glyphs, show_grid)


def render(sequences: SequenceList[Sequence], config: RenderConfig | None = None, sink: TextIO | None = None) -> None:
    """Render `sequences` into `sink` (stdout when omitted).

    Raises:
        EmptyInputError: If no sequences are given.
        MismatchedLengthsError: If the sequences differ in step count.
        OSError: If writing to the sink fails.
    """
    if sink is None:
        sink = sys.stdout
    WaveformRenderer(config).write(sequences, sink)


def render_to_string(sequences: SequenceList[Sequence], config: RenderConfig | None = None) -> str:
    """Render `sequences` and return the diagram text."""
    return WaveformRenderer(config).render(sequences)
