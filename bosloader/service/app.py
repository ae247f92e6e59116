"""FastAPI application serving the component redirect map."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from .. import __version__
from ..aggregator import Aggregator
from ..errors import LoaderError
from ..logging import get_logger

_LOGGER = get_logger("service")


class HealthResponse(BaseModel):
    status: str


def create_app(aggregator_factory: Callable[[], Aggregator]) -> FastAPI:
    """Create the FastAPI application serving local components.

    ``aggregator_factory`` is called once per request so that every response
    reflects the files on disk at that moment.
    """
    app = FastAPI(title="bos-loader", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
    )

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/")
    async def components() -> Response:
        aggregator = aggregator_factory()
        loop = asyncio.get_running_loop()
        body = await loop.run_in_executor(None, aggregator.render)
        return Response(content=body, media_type="application/json")

    @app.exception_handler(LoaderError)
    async def loader_error_handler(_: Any, exc: LoaderError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc)})

    return app


def run_service(
    app: FastAPI, host: str = "127.0.0.1", port: int = 3030
) -> None:  # pragma: no cover - integration path
    _LOGGER.info("Serving on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level="warning")
