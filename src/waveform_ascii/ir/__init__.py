"""Intermediate representation: the sequence model."""

from waveform_ascii.ir.sequence import Sequence, validate_sequences

__all__ = [
    "Sequence",
    "validate_sequences",
]
