from __future__ import annotations

from components.narrative import render_page_intro, render_placeholder
from config import AppConfig


def render(cfg: AppConfig) -> None:
    render_page_intro(title="Commandes", context="Suivi des commandes fournisseurs et clients.")
    render_placeholder("La liste des commandes sera affichée ici.")
