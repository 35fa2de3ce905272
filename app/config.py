from __future__ import annotations

import os
from dataclasses import dataclass, asdict
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens (Pharmatri+ panel styling)
# - Centralized here; styles.py turns them into CSS variables.
#
THEME = {
    "bg_primary": "#F4F7F6",     # page background
    "bg_secondary": "#FFFFFF",   # sidebar / top surfaces
    "bg_card": "#FFFFFF",
    # Accents (pharmacy green + ink)
    "accent_primary": "#0F9D58",
    "accent_secondary": "#34B77A",  # hover
    "ink_900": "#0B1F1A",
    "ink_800": "#12302A",
    # Text + borders
    "text_primary": "#111827",
    "text_secondary": "rgba(17, 24, 39, 0.72)",
    "border_color": "#E2E8E6",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 10,
    # Status colors
    "success": "#067647",
    "warning": "#F59E0B",
    "danger": "#B42318",
}


@dataclass(frozen=True)
class DbConfig:
    host: str
    database: str
    port: int
    charset: str
    username: str
    # Empty string is a valid password (local MySQL root)
    password: str

    def safe_dict(self) -> dict:
        d = asdict(self)
        d["password"] = "***" if self.password else ""
        return d


@dataclass(frozen=True)
class AppConfig:
    app_name: str
    db: DbConfig
    log_level: str


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getenv_int(name: str, default: int) -> int:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Defaults point at a local XAMPP-style MySQL (root, no password)
    """
    load_dotenv(override=False)

    db = DbConfig(
        host=_getenv("PHARMATRI_DB_HOST", "localhost") or "localhost",
        database=_getenv("PHARMATRI_DB_NAME", "pharmatrixdb") or "pharmatrixdb",
        port=_getenv_int("PHARMATRI_DB_PORT", 3306),
        charset=_getenv("PHARMATRI_DB_CHARSET", "utf8") or "utf8",
        username=_getenv("PHARMATRI_DB_USER", "root") or "root",
        # No _getenv here: it would collapse a deliberately blank password to None
        password=os.getenv("PHARMATRI_DB_PASSWORD", ""),
    )

    return AppConfig(
        app_name="Pharmatri+",
        db=db,
        log_level=(_getenv("PHARMATRI_LOG_LEVEL", "INFO") or "INFO").upper(),
    )
