"""Centralized configuration for waveform-ascii."""

from __future__ import annotations

from dataclasses import dataclass

from waveform_ascii.renderers.charset import GlyphSet


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""

    show_grid: bool = True
    show_time_axis: bool = True
    glyph_set: GlyphSet = GlyphSet.Unicode
