"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    CORS_ALLOW_ALL,
    DATABASE_URL,
    DB_RESET,
    HOST,
    LOG_LEVEL,
    PORT,
    build_engine,
    setup_logging,
)

logger = logging.getLogger(__name__)


def create_app(database_url: Optional[str] = None, *, reset_db: bool = DB_RESET) -> FastAPI:
    """Build the application; the engine is opened and disposed by the lifespan."""

    setup_logging(LOG_LEVEL)
    url = database_url or DATABASE_URL

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(url)
        if reset_db:
            SQLModel.metadata.drop_all(engine)
        SQLModel.metadata.create_all(engine)
        app.state.engine = engine
        logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            engine.dispose()
            logger.info("Database connection closed")

    app = FastAPI(title="Dynamic Ranking API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=not CORS_ALLOW_ALL,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("ranking_backend.app:app", host=HOST, port=PORT)
