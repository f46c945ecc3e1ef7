"""Renderers: glyph sets, the row state machine and the diagram layout."""

from waveform_ascii.renderers.charset import ASCII_GLYPHS, UNICODE_GLYPHS, Glyphs, GlyphSet

__all__ = [
    "ASCII_GLYPHS",
    "GlyphSet",
    "Glyphs",
    "UNICODE_GLYPHS",
]
