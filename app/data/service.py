from __future__ import annotations

import streamlit as st

from config import AppConfig
from data.connection import Database, DatabaseConnectionError


def open_database(cfg: AppConfig) -> Database:
    """Connected helper for the current page run; halts the page if MySQL is unreachable."""
    db = Database(cfg.db)
    try:
        db.get_connection()
    except DatabaseConnectionError as e:
        # Already logged by Database.get_connection
        st.error(str(e))
        st.stop()
    return db


def ping(db: Database) -> bool:
    row = db.fetch_results(db.execute("SELECT 1 AS ok"), one=True)
    return bool(row) and row.get("ok") == 1
