"""Sequence model: one named signal and its per-step edges.

Sequences are produced by the parser and consumed read-only by the
renderer. All sequences drawn in one diagram must share a step count;
`validate_sequences` enforces that before any output is written.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from waveform_ascii.errors import EmptyInputError, EmptySequenceError, MismatchedLengthsError
from waveform_ascii.types import Edge


@dataclass(frozen=True)
class Sequence:
    title: str
    edges: tuple[Edge, ...]

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("sequence title must not be empty")
        # Accept any iterable of edges but store an immutable tuple.
        object.__setattr__(self, "edges", tuple(self.edges))

    @classmethod
    def from_spec(cls, title: str, spec: str) -> Sequence:
        """Build a sequence from a string of edge characters, e.g. 'LLH-L'."""
        return cls(title=title, edges=tuple(Edge.from_char(c) for c in spec))

    def __len__(self) -> int:
        return len(self.edges)

    def __getitem__(self, index: int) -> Edge:
        return self.edges[index]

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)


def validate_sequences(sequences: Iterable[Sequence]) -> int:
    """Check a diagram's sequences and return their common step count.

    Raises:
        EmptyInputError: If no sequences are given.
        EmptySequenceError: If the sequences have no steps.
        MismatchedLengthsError: If any sequence differs in length from the first.
    """
    items = list(sequences)
    if not items:
        raise EmptyInputError()
    width = len(items[0])
    if width == 0:
        raise EmptySequenceError(items[0].title)
    for seq in items[1:]:
        if len(seq) != width:
            raise MismatchedLengthsError(seq.title, width, len(seq))
    return width
