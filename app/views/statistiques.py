from __future__ import annotations

from components.narrative import render_page_intro, render_placeholder
from config import AppConfig


def render(cfg: AppConfig) -> None:
    # Not linked in the navigation yet; reached only through the placeholder entry
    render_page_intro(title="Statistiques")
    render_placeholder("Les statistiques ne sont pas encore disponibles.")
