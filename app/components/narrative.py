from __future__ import annotations

import streamlit as st


def render_page_intro(title: str, context: str | None = None) -> None:
    st.markdown(
        f"""
<div class="page-intro">
  <div class="page-intro-title">{title}</div>
  {f'<div class="page-intro-context">{context}</div>' if context else ''}
</div>
        """,
        unsafe_allow_html=True,
    )


def render_placeholder(body: str) -> None:
    """Callout for pages whose content is not built yet."""
    st.markdown(
        f"""
<div class="callout">
  <div class="callout-title">Bientôt disponible</div>
  <div class="callout-body">{body}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
