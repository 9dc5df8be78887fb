from __future__ import annotations

from fastapi import Request

from .db import Database


def get_database(request: Request) -> Database:
    """Return the data source opened by the application lifespan."""
    return request.app.state.database
