"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import logging
import os
import sys
from types import ModuleType
from typing import Optional

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
if APP_DIR not in sys.path:
    sys.path.insert(0, APP_DIR)

from components.styles import apply_theme  # noqa: E402
from components.sidebar import render_sidebar  # noqa: E402
from components.header import render_header  # noqa: E402
from config import get_config  # noqa: E402

from views import dashboard, commandes, medicaments, users, statistiques, settings  # noqa: E402

ROUTES = {
    "index": dashboard,
    "commandes": commandes,
    "medicaments": medicaments,
    "user": users,
    "setting": settings,
}


def route(view: Optional[str]) -> ModuleType:
    """View module for a page key; the unlinked sidebar entry (None) gets the Statistiques placeholder."""
    if view is None:
        return statistiques
    return ROUTES[view]


def main() -> None:
    apply_theme()
    cfg = get_config()
    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    state = render_sidebar(cfg)

    render_header(cfg, subtitle="Panneau d'administration")

    route(state.view).render(cfg)


if __name__ == "__main__":
    main()
