"""
MySQL access helper.

One `Database` per page run. The connection is opened on first use and
reused for the lifetime of the helper. Connection failures surface as
`DatabaseConnectionError`; statement errors come straight from the driver.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence, Union

import mysql.connector
from mysql.connector import Error as MySQLError

from config import DbConfig

logger = logging.getLogger(__name__)

Params = Union[Sequence[Any], dict[str, Any]]


class DatabaseConnectionError(RuntimeError):
    pass


class Database:
    def __init__(self, cfg: DbConfig, connector: Callable[..., Any] = mysql.connector.connect):
        self.cfg = cfg
        self._connector = connector
        self._conn = None

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def get_connection(self):
        """Return the connection, opening it on the first call."""
        if self._conn is None:
            logger.info("Connecting to MySQL %s", self.cfg.safe_dict())
            try:
                self._conn = self._connector(
                    host=self.cfg.host,
                    database=self.cfg.database,
                    port=self.cfg.port,
                    charset=self.cfg.charset,
                    user=self.cfg.username,
                    password=self.cfg.password,
                    autocommit=True,
                )
            except (MySQLError, OSError) as e:
                logger.error("MySQL connection failed: %s", e)
                raise DatabaseConnectionError(f"Echec de connexion : {e}") from e
        return self._conn

    def execute(self, sql: str, params: Optional[Params] = None):
        """
        Run `sql` and return the cursor so callers can fetch from it.

        Rows come back as dicts (column name -> value). `params` is bound by
        the driver, never formatted into the SQL text.
        """
        # Buffered so a partial fetch never leaves unread rows on the connection
        cur = self.get_connection().cursor(dictionary=True, buffered=True)
        if params is None:
            cur.execute(sql)
        else:
            cur.execute(sql, params)
        return cur

    @staticmethod
    def fetch_results(statement, one: bool = True):
        if one:
            return statement.fetchone()
        return statement.fetchall()

    def close(self) -> None:
        if self._conn is not None:
            try:
                self._conn.close()
            finally:
                self._conn = None

    # Names kept from the PHP panel's Database class
    getConnect = get_connection
    prepare = execute
    getDatas = fetch_results
