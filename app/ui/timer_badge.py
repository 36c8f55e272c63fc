"""
Countdown badge and rerun scheduling for timed phases.
"""

from __future__ import annotations

import time

import streamlit as st

from core.recall import PhaseController


def format_clock(seconds: int) -> str:
    """Format seconds as m:ss."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"


def render_timer_badge(seconds: int, color: str) -> None:
    st.markdown(
        f'<div style="display:inline-block; border:2px solid {color}; color:{color}; '
        f'font-size:30px; font-weight:900; border-radius:16px; padding:8px 28px; '
        f'letter-spacing:3px; margin-bottom:18px;">{format_clock(seconds)}</div>',
        unsafe_allow_html=True
    )


def schedule_next_tick(controller: PhaseController) -> None:
    """
    Sleep until the next countdown tick is due, then rerun the script.

    Does nothing once the countdown has been cancelled.
    """
    delay = controller.seconds_until_next_tick()
    if delay is None:
        return
    time.sleep(delay)
    st.rerun()
