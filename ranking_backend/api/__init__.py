"""API assembly helpers."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..errors import RankingError, StorageError
from .routers import ALL_ROUTERS

logger = logging.getLogger(__name__)


async def _ranking_error_handler(request: Request, exc: RankingError) -> JSONResponse:
    # Storage failures are logged with a traceback where they are raised.
    if not isinstance(exc, StorageError):
        logger.info(
            "%s %s rejected (%s): %s",
            request.method,
            request.url.path,
            exc.kind,
            exc.message,
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_routes(app: FastAPI) -> None:
    """Attach all application routers and error handlers to the given app."""

    app.add_exception_handler(RankingError, _ranking_error_handler)
    for router in ALL_ROUTERS:
        app.include_router(router)


__all__ = ["register_routes"]
