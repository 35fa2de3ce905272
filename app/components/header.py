from __future__ import annotations

import base64
import os
from typing import Optional

import streamlit as st

from config import AppConfig

LOGO_PATH = os.path.join("image", "logo.png")


def read_asset_b64(rel_path: str) -> Optional[str]:
    here = os.path.dirname(__file__)
    asset_path = os.path.abspath(os.path.join(here, "..", "assets", rel_path))
    if not os.path.exists(asset_path):
        return None
    with open(asset_path, "rb") as f:
        return base64.b64encode(f.read()).decode("utf-8")


def logo_html(app_name: str, height_px: int) -> str:
    """`<img>` for the panel logo, or "" when assets/image/logo.png is missing."""
    logo_b64 = read_asset_b64(LOGO_PATH)
    if not logo_b64:
        return ""
    return f'<img src="data:image/png;base64,{logo_b64}" alt="{app_name} Logo" class="logo" style="height:{height_px}px; width:auto;" />'


def db_pill(cfg: AppConfig) -> str:
    return f"MySQL: {cfg.db.database}@{cfg.db.host}:{cfg.db.port}"


def render_header(cfg: AppConfig, subtitle: str) -> None:
    st.markdown(
        f"""
<div class="ph-header">
  <div class="ph-header-left">
    {logo_html(cfg.app_name, 28)}
    <div>
      <div class="ph-title">{cfg.app_name}</div>
      <div class="ph-subtitle">{subtitle}</div>
    </div>
  </div>
  <div class="pill"><span class="dot"></span>{db_pill(cfg)}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
