"""
SQLite data source.

Responsibilities:
- Own the single aiosqlite connection for the process lifetime.
- Run parameterized statements and return rows as plain dicts.
- Surface every driver failure as a typed ``QueryError``.
"""

from .database import Database, QueryError
from .params import flag_values, row_id

__all__ = ["Database", "QueryError", "flag_values", "row_id"]
