from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import Depends, FastAPI

from . import __version__
from .config import DEFAULT_APP_CONFIG, AppConfig
from .db import Database
from .dependencies import get_database
from .dishes.routes import router as dishes_router
from .restaurants.routes import router as restaurants_router

logger = logging.getLogger(__name__)


def create_app(config: AppConfig = DEFAULT_APP_CONFIG) -> FastAPI:
    """Build the API bound to one data source.

    The database is opened inside the lifespan, so the server only starts
    accepting requests once the connection exists.
    """

    database = Database(config.database_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await database.connect()
        try:
            yield
        finally:
            await database.close()

    app = FastAPI(
        title="Restaurant Query API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.database = database

    # ── Public endpoints ─────────────────────────────────────────────────

    @app.get("/health")
    def health(db: Database = Depends(get_database)) -> dict[str, str]:
        return {"status": "ok", "database": "ready" if db.is_ready else "unavailable"}

    app.include_router(restaurants_router)
    app.include_router(dishes_router)
    return app


app = create_app()


def main(config: AppConfig = DEFAULT_APP_CONFIG) -> None:
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server running on %s", config.base_url)
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level=config.log_level.lower())
