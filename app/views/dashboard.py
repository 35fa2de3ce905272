from __future__ import annotations

import streamlit as st

from components.narrative import render_page_intro
from config import AppConfig


def render(cfg: AppConfig) -> None:
    render_page_intro(
        title="Dashboard",
        context=f"Vue d'ensemble de {cfg.app_name}. Utilisez la barre latérale pour accéder aux commandes, médicaments et utilisateurs.",
    )

    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Commandes", "—")
    with c2:
        st.metric("Médicaments", "—")
    with c3:
        st.metric("Utilisateurs", "—")
