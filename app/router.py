"""
Phase router: one page renderer per quiz phase.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.pages.distract import render_distract_page
from app.pages.intro import render_intro_page
from app.pages.recall import render_recall_page
from app.pages.results import render_results_page
from app.pages.study import render_study_page
from core.recall import Phase, PhaseController


@dataclass(frozen=True)
class PhasePage:
    phase: Phase
    render: Callable[[PhaseController], None]


PAGES = [
    PhasePage(phase=Phase.INTRO, render=render_intro_page),
    PhasePage(phase=Phase.STUDY, render=render_study_page),
    PhasePage(phase=Phase.DISTRACT, render=render_distract_page),
    PhasePage(phase=Phase.RECALL, render=render_recall_page),
    PhasePage(phase=Phase.RESULTS, render=render_results_page),
]

PAGE_BY_PHASE: dict[Phase, PhasePage] = {page.phase: page for page in PAGES}


def render_current_phase(controller: PhaseController) -> None:
    PAGE_BY_PHASE[controller.phase].render(controller)
