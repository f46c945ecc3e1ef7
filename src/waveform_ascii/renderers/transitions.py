"""Transition state machine — one independent pass per row.

Each row of a signal block is drawn by folding over the edge sequence while
threading the previous visual state (the last non-Keep edge) explicitly:

  stub │ glyph │ spacer │ glyph │ spacer │ ... │ glyph │ stub

  - stub:   phase-out marker if the row is active for the state, else blank
  - spacer: keep-level filler if the row is active for the state, else blank
  - glyph:  table[current edge][previous state]; BLANK cells become the grid
            glyph (grid on) or a space (grid off)

A row is active when the visual state puts a flat rail on it: top for
High/Both, bottom for Low/Both, middle for HighImpedance.
"""

from __future__ import annotations

from collections.abc import Iterable

from waveform_ascii.renderers.charset import BLANK, Glyphs, Table
from waveform_ascii.types import Edge, Row

IDLE_STATE = Edge.HighImpedance

_ACTIVE_STATES: dict[Row, frozenset[Edge]] = {
    Row.Top: frozenset({Edge.High, Edge.Both}),
    Row.Middle: frozenset({Edge.HighImpedance}),
    Row.Bottom: frozenset({Edge.Low, Edge.Both}),
}


def is_row_active(state: Edge, row: Row) -> bool:
    """True when `state` draws a flat rail on `row`."""
    return state in _ACTIVE_STATES[row]


def table_for_row(glyphs: Glyphs, row: Row) -> Table:
    if row == Row.Top:
        return glyphs.top
    if row == Row.Middle:
        return glyphs.middle
    return glyphs.bottom


def transition_glyph(table: Table, edge: Edge, previous: Edge, glyphs: Glyphs, show_grid: bool) -> str:
    """Look up the junction glyph for moving from `previous` into `edge`."""
    cell = table[edge.value][previous.value]
    if cell is BLANK:
        return glyphs.grid if show_grid else " "
    return cell


def _stub(state: Edge, row: Row, glyphs: Glyphs) -> str:
    return glyphs.phase_out if is_row_active(state, row) else "  "


def _spacer(state: Edge, row: Row, glyphs: Glyphs) -> str:
    return glyphs.keep_level if is_row_active(state, row) else "  "


def render_row(edges: Iterable[Edge], row: Row, glyphs: Glyphs, show_grid: bool = True) -> str:
    """Render one row of a signal block, stubs included, gutter excluded.

    Args:
        edges: The signal's edges, one per time step (at least one).
        row: Which lane to draw.
        glyphs: Palette supplying the table, stubs, fillers and grid glyph.
        show_grid: Whether BLANK cells show the grid glyph.

    Returns:
        The row text: 2-char stub, then per step an optional 2-char spacer
        and a glyph, then the trailing 2-char stub.
    """
    items = list(edges)
    table = table_for_row(glyphs, row)

    state = IDLE_STATE
    # The trace enters the window already in its first asserted level.
    if items and items[0] != Edge.Keep:
        state = items[0]

    parts = [_stub(state, row, glyphs)]
    for i, edge in enumerate(items):
        if i > 0:
            parts.append(_spacer(state, row, glyphs))
        parts.append(transition_glyph(table, edge, state, glyphs, show_grid))
        if edge != Edge.Keep:
            state = edge
    parts.append(_stub(state, row, glyphs))
    return "".join(parts)
