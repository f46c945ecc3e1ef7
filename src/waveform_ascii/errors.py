"""Error types raised by the parser and renderer.

Every error is a ValueError so callers can treat any bad input uniformly;
I/O failures from the output sink are plain OSErrors and are not wrapped.
"""

from __future__ import annotations


class WaveformError(ValueError):
    """Base class for all caller-input errors."""


class EmptyInputError(WaveformError):
    def __init__(self) -> None:
        super().__init__("empty input: no signals to render")


class EmptySequenceError(WaveformError):
    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f"signal '{title}' has no steps")


class MismatchedLengthsError(WaveformError):
    def __init__(self, title: str, expected: int, actual: int) -> None:
        self.title = title
        self.expected = expected
        self.actual = actual
        super().__init__(f"signal '{title}' has {actual} steps, expected {expected}")


class MalformedLineError(WaveformError):
    def __init__(self, line_no: int, line: str, reason: str) -> None:
        self.line_no = line_no
        self.line = line
        super().__init__(f"line {line_no}: {reason}: {line!r}")


class IllegalEdgeCharacterError(WaveformError):
    def __init__(self, char: str, line_no: int | None = None, column: int | None = None) -> None:
        self.char = char
        self.line_no = line_no
        self.column = column
        where = ""
        if line_no is not None:
            where = f"line {line_no}, column {column}: "
        super().__init__(f"{where}illegal edge character {char!r}")
