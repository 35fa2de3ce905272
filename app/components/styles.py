from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "Pharmatri+ Admin"


def build_css() -> str:
    # Theme tokens (config.py) -> CSS variables
    radius = int(THEME["radius_px"])
    css = """
<style>
:root{
  --accent: __ACCENT__;
  --accent-hover: __ACCENT_HOVER__;
  --ink-900: __INK_900__;
  --ink-800: __INK_800__;

  --bg-primary: __BG_PRIMARY__;
  --bg-secondary: __BG_SECONDARY__;
  --card-bg: __CARD_BG__;
  --card-border: __CARD_BORDER__;

  --text-primary: __TEXT_PRIMARY__;
  --text-secondary: __TEXT_SECONDARY__;
  --shadow: __SHADOW__;
  --radius: __RADIUS_PX__px;
  --success: __SUCCESS__;
}

#MainMenu { visibility: hidden; }
footer { visibility: hidden; }

html, body, [data-testid="stAppViewContainer"]{
  background: var(--bg-primary) !important;
  color: var(--text-primary) !important;
}

[data-testid="stSidebar"]{
  background: var(--bg-secondary) !important;
  border-right: 1px solid var(--card-border) !important;
}

/* Sidebar nav: one card per link, active one highlighted */
[data-testid="stSidebar"] div[role="radiogroup"] > label{
  background: var(--card-bg) !important;
  border: 1px solid var(--card-border) !important;
  border-radius: 12px !important;
  padding: 10px 12px !important;
  margin: 0 0 10px 0 !important;
}
[data-testid="stSidebar"] div[role="radiogroup"] > label:hover{
  border-color: var(--accent-hover) !important;
}
[data-testid="stSidebar"] div[role="radiogroup"] > label:has(input:checked){
  border-color: var(--accent) !important;
  box-shadow: var(--shadow) !important;
}

.sidebar-header{ display: flex; align-items: center; gap: 10px; margin-bottom: 8px; }
.sidebar-header h3{ margin: 0; color: var(--ink-900); }

.ph-header{
  display: flex;
  align-items: center;
  justify-content: space-between;
  background: var(--bg-secondary);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  padding: 12px 16px;
  margin-bottom: 16px;
}
.ph-header-left{ display: flex; align-items: center; gap: 12px; }
.ph-title{ font-size: 18px; font-weight: 700; color: var(--ink-900); }
.ph-subtitle{ font-size: 13px; color: var(--text-secondary); }

.pill{
  display: inline-flex;
  align-items: center;
  gap: 6px;
  font-size: 12px;
  padding: 4px 10px;
  border-radius: 999px;
  border: 1px solid var(--card-border);
  color: var(--ink-800);
}
.pill .dot{ width: 8px; height: 8px; border-radius: 50%; background: var(--success); }

.page-intro{ margin: 0 0 16px 0; }
.page-intro-title{ font-size: 22px; font-weight: 700; color: var(--ink-900); }
.page-intro-context{ font-size: 14px; color: var(--text-secondary); }

.callout{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-left: 4px solid var(--accent);
  border-radius: var(--radius);
  padding: 12px 14px;
}
.callout-title{ font-size: 14px; font-weight: 700; color: var(--ink-900); margin-bottom: 6px; }
.callout-body{ font-size: 14px; color: var(--text-secondary); line-height: 1.5; }
</style>
"""

    tokens = {
        "__ACCENT__": str(THEME["accent_primary"]),
        "__ACCENT_HOVER__": str(THEME["accent_secondary"]),
        "__INK_900__": str(THEME["ink_900"]),
        "__INK_800__": str(THEME["ink_800"]),
        "__BG_PRIMARY__": str(THEME["bg_primary"]),
        "__BG_SECONDARY__": str(THEME["bg_secondary"]),
        "__CARD_BG__": str(THEME["bg_card"]),
        "__CARD_BORDER__": str(THEME["border_color"]),
        "__TEXT_PRIMARY__": str(THEME["text_primary"]),
        "__TEXT_SECONDARY__": str(THEME["text_secondary"]),
        "__SHADOW__": str(THEME["shadow"]),
        "__RADIUS_PX__": str(radius),
        "__SUCCESS__": str(THEME["success"]),
    }
    for k, v in tokens.items():
        css = css.replace(k, v)
    return css


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="💊",
        layout="wide",
        initial_sidebar_state="expanded",
    )
    st.markdown(build_css(), unsafe_allow_html=True)
