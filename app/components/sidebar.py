from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from components.header import logo_html
from config import AppConfig


@dataclass(frozen=True)
class NavItem:
    label: str
    page: Optional[str]  # None = not linked yet
    icon: str

    @property
    def display(self) -> str:
        return f"{self.icon} {self.label}"


@dataclass(frozen=True)
class SidebarState:
    view: Optional[str]
    label: str


NAV_ITEMS = (
    NavItem("Dashboard", "index", "🏠"),
    NavItem("Commandes", "commandes", "🛒"),
    NavItem("Medicament", "medicaments", "💊"),
    NavItem("Utilisation", "user", "👥"),
    NavItem("Statistiques", None, "📊"),
    NavItem("Paramètres", "setting", "⚙️"),
)

DEFAULT_PAGE = "index"


def default_item() -> NavItem:
    return next(i for i in NAV_ITEMS if i.page == DEFAULT_PAGE)


def resolve_page(label: str) -> Optional[str]:
    """Page key for a nav label; None for the unlinked entry, KeyError for labels not in the nav."""
    for item in NAV_ITEMS:
        if label in (item.label, item.display):
            return item.page
    raise KeyError(label)


def render_sidebar(cfg: AppConfig) -> SidebarState:
    with st.sidebar:
        st.markdown(
            f"""
<div class="sidebar-header">
  {logo_html(cfg.app_name, 40)}
  <h3>{cfg.app_name}</h3>
</div>
            """,
            unsafe_allow_html=True,
        )
        st.caption("Gestion de stock pharmacie")

        labels = [i.display for i in NAV_ITEMS]
        default_label = st.session_state.get("nav_label", default_item().display)
        idx = labels.index(default_label) if default_label in labels else labels.index(default_item().display)

        label = st.radio(
            "Nav",
            labels,
            index=idx,
            label_visibility="collapsed",
        )
        st.session_state["nav_label"] = label

    return SidebarState(view=resolve_page(label), label=label)
