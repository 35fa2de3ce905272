from __future__ import annotations

from components.narrative import render_page_intro, render_placeholder
from config import AppConfig


def render(cfg: AppConfig) -> None:
    render_page_intro(title="Medicament", context="Catalogue et stock des médicaments.")
    render_placeholder("Le catalogue des médicaments sera affiché ici.")
