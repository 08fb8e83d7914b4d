"""FastAPI application factory.

The app holds a Container on ``app.state``; the registry it resolves
is the only process state, so each ``create_app`` call starts empty
unless a container is passed in.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..container import Container
from ..domain.errors import (
    GraphNotFoundError,
    GraphRegistryError,
    GraphTooLargeError,
    NoPathFoundError,
    RegistryFullError,
)
from .routes import router

logger = logging.getLogger(__name__)


async def _graph_not_found(request: Request, exc: GraphNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": "Graph not found"})


async def _no_path_found(request: Request, exc: NoPathFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": "Path not found"})


async def _registry_full(request: Request, exc: RegistryFullError) -> JSONResponse:
    return JSONResponse(status_code=503, content={"detail": exc.message})


async def _graph_too_large(request: Request, exc: GraphTooLargeError) -> JSONResponse:
    return JSONResponse(status_code=413, content={"detail": exc.message})


async def _domain_error(request: Request, exc: GraphRegistryError) -> JSONResponse:
    logger.error("Unhandled domain error", extra={"error": str(exc), "path": request.url.path})
    return JSONResponse(status_code=500, content={"detail": exc.message})


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed request", extra={"path": request.url.path})
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request", "errors": _errors_payload(exc)},
    )


def _errors_payload(exc: RequestValidationError) -> list:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Build the HTTP application.

    Args:
        container: DI container to serve from; a default one is created
            when omitted.

    Returns:
        The configured FastAPI app.
    """
    container = container or Container.create_default()

    app = FastAPI(title=container.config.api.title)
    app.state.container = container

    app.add_exception_handler(GraphNotFoundError, _graph_not_found)
    app.add_exception_handler(NoPathFoundError, _no_path_found)
    app.add_exception_handler(RegistryFullError, _registry_full)
    app.add_exception_handler(GraphTooLargeError, _graph_too_large)
    app.add_exception_handler(GraphRegistryError, _domain_error)
    app.add_exception_handler(RequestValidationError, _validation_error)

    app.include_router(router)
    return app
