"""waveform-ascii: signal edge sequences to Unicode/ASCII timing diagrams."""

from waveform_ascii.config import RenderConfig
from waveform_ascii.errors import (
    EmptyInputError,
    EmptySequenceError,
    IllegalEdgeCharacterError,
    MalformedLineError,
    MismatchedLengthsError,
    WaveformError,
)
from waveform_ascii.ir.sequence import Sequence
from waveform_ascii.parsers import parse
from waveform_ascii.renderers.charset import GlyphSet
from waveform_ascii.renderers.waveform import WaveformRenderer, render, render_to_string
from waveform_ascii.types import Edge

__all__ = [
    "Edge",
    "EmptyInputError",
    "EmptySequenceError",
    "GlyphSet",
    "IllegalEdgeCharacterError",
    "MalformedLineError",
    "MismatchedLengthsError",
    "RenderConfig",
    "Sequence",
    "WaveformError",
    "WaveformRenderer",
    "parse",
    "render",
    "render_text",
    "render_to_string",
]


def render_text(src: str, grid: bool = True, time_axis: bool = True, ascii: bool = False) -> str:
    """Parse a waveform description and render it as a timing diagram.

    Args:
        src: Source text, one `name | edges` line per signal.
        grid: Draw grid separator lines and grid guides in quiet regions.
        time_axis: Draw the step index header rows.
        ascii: Use plain ASCII instead of Unicode box-drawing characters.

    Returns:
        The rendered diagram, one newline-terminated line per row.

    Raises:
        ValueError: If the input cannot be parsed, is empty, or the signals
            differ in length (see waveform_ascii.errors).
    """
    config = RenderConfig(
        show_grid=grid,
        show_time_axis=time_axis,
        glyph_set=GlyphSet.Ascii if ascii else GlyphSet.Unicode,
    )
    return render_to_string(parse(src), config)
