from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any, Sequence

import aiosqlite

logger = logging.getLogger(__name__)


class QueryError(Exception):
    """Raised when a statement cannot be executed against the data source."""

    def __init__(self, sql: str, message: str) -> None:
        super().__init__(message)
        self.sql = sql


class Database:
    """Explicitly constructed handle to the SQLite store.

    Created once at startup, connected before the app accepts traffic and
    handed to route handlers through a FastAPI dependency.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._connection: aiosqlite.Connection | None = None

    @property
    def is_ready(self) -> bool:
        return self._connection is not None

    async def connect(self) -> None:
        if self._connection is not None:
            return
        connection = await aiosqlite.connect(self.path)
        connection.row_factory = sqlite3.Row
        self._connection = connection
        logger.info("Connected to the SQLite database at %s.", self.path)

    async def close(self) -> None:
        if self._connection is None:
            return
        await self._connection.close()
        self._connection = None
        logger.info("Closed the SQLite database at %s.", self.path)

    async def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        connection = self._require_connection(sql)
        try:
            async with connection.execute(sql, tuple(params)) as cursor:
                rows = await cursor.fetchall()
        except Exception as exc:
            logger.exception("Query failed: %s", sql)
            raise QueryError(sql, str(exc)) from exc
        return [dict(row) for row in rows]

    async def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> dict[str, Any] | None:
        connection = self._require_connection(sql)
        try:
            async with connection.execute(sql, tuple(params)) as cursor:
                row = await cursor.fetchone()
        except Exception as exc:
            logger.exception("Query failed: %s", sql)
            raise QueryError(sql, str(exc)) from exc
        return dict(row) if row is not None else None

    def _require_connection(self, sql: str) -> aiosqlite.Connection:
        if self._connection is None:
            logger.error("Query issued before the database was connected: %s", sql)
            raise QueryError(sql, "database is not connected")
        return self._connection
