"""
Word Tile UI Component

Renders recall-grid tiles and the post-submission review grid.
"""

from __future__ import annotations

from typing import Sequence

import streamlit as st

from app.ui.tile_style import LANGUAGE_COLORS, REVIEW_LEGEND_ORDER, TILE_STYLES
from core.recall import GridItem, PhaseController, TileState


GRID_COLUMNS = 5


def _tile_label(item: GridItem, state: TileState) -> str:
    """
    Button label: state icon, word, language badge.
    """
    icon = TILE_STYLES[state].icon
    prefix = f"{icon} " if icon else ""
    return f"{prefix}{item.text} · {item.language.value}"


def render_recall_grid(controller: PhaseController) -> str | None:
    """
    Render the clickable recall grid.

    Returns:
        Text of the tile clicked on this run, or None
    """
    clicked = None
    grid: Sequence[GridItem] = controller.grid
    for row_start in range(0, len(grid), GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS)
        for column, item in zip(columns, grid[row_start:row_start + GRID_COLUMNS]):
            state = controller.tile_state(item)
            with column:
                if st.button(
                    _tile_label(item, state),
                    key=f"tile_{item.text}",
                    type="primary" if state == TileState.SELECTED else "secondary",
                    use_container_width=True,
                ):
                    clicked = item.text
    return clicked


def _tile_html(item: GridItem, state: TileState) -> str:
    style = TILE_STYLES[state]
    badge_color = LANGUAGE_COLORS[item.language]
    return (
        f'<div style="background:{style.bg_color}; border:1.5px solid {style.border_color}; '
        f'border-radius:12px; padding:10px 8px; text-align:center; margin-bottom:8px;">'
        f'<div style="font-size:0.7em; font-weight:800; color:{badge_color};">'
        f'{style.icon} {item.language.value}</div>'
        f'<div style="font-weight:700; color:{style.text_color};">{item.text}</div>'
        f'</div>'
    )


def render_review_grid(controller: PhaseController) -> None:
    """
    Render the read-only selection review with a legend.
    """
    legend = " · ".join(
        f"{TILE_STYLES[state].icon} {TILE_STYLES[state].legend}".strip()
        for state in REVIEW_LEGEND_ORDER
    )
    st.caption(legend)

    grid = controller.grid
    for row_start in range(0, len(grid), GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS)
        for column, item in zip(columns, grid[row_start:row_start + GRID_COLUMNS]):
            with column:
                st.markdown(_tile_html(item, controller.tile_state(item)), unsafe_allow_html=True)
