from __future__ import annotations

from components.narrative import render_page_intro, render_placeholder
from config import AppConfig


def render(cfg: AppConfig) -> None:
    render_page_intro(title="Utilisation", context="Comptes ayant accès au panneau.")
    render_placeholder("La gestion des utilisateurs sera affichée ici.")
