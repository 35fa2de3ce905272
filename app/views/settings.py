from __future__ import annotations

import streamlit as st

from components.narrative import render_page_intro
from config import AppConfig
from data.service import open_database, ping


def render(cfg: AppConfig) -> None:
    render_page_intro(title="Paramètres", context="Connexion MySQL utilisée par le panneau.")

    st.markdown("**Base de données**")
    st.json(cfg.db.safe_dict())

    if st.button("Tester la connexion"):
        db = open_database(cfg)
        try:
            if ping(db):
                st.success(f"Connecté à {cfg.db.database}@{cfg.db.host}:{cfg.db.port}")
            else:
                st.warning("Connexion ouverte mais SELECT 1 n'a rien renvoyé")
        finally:
            db.close()
