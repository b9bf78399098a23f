"""
App factory for the fieldgraph settings API.

Creates a pre-configured FastAPI application with:
- CORS middleware
- Health check endpoint
- Lifecycle hooks for database and live schema
- Exception handlers for capability failures
"""

from __future__ import annotations


import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from graphql import GraphQLSchema

from ..config import FieldgraphConfig, load_config
from ..core.errors import IAMError
from ..core.schema import load_live_schema, set_schema
from ..runtime.aggregator import SettingsAggregator
from ..service.database import close_db, configure_database, init_db
from .router import router, set_aggregator

logger = logging.getLogger(__name__)


class HealthcheckLogFilter(logging.Filter):
    """Filter out noisy healthcheck logs."""

    FILTERED_PATHS = ("/health",)

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        for path in self.FILTERED_PATHS:
            if f'"{path}' in message or f" {path} " in message:
                return False
        return True


def _setup_logging_filter():
    """Add filter to uvicorn access logger to suppress healthcheck logs."""
    uvicorn_access = logging.getLogger("uvicorn.access")
    uvicorn_access.addFilter(HealthcheckLogFilter())


def create_app(
    config: Optional[FieldgraphConfig] = None,
    schema: Optional[GraphQLSchema] = None,
    *,
    title: str = "Fieldgraph Settings API",
    cors_origins: Optional[list[str]] = None,
    init_database: bool = True,
) -> FastAPI:
    """
    Create the settings API app.

    Args:
        config: Configuration (default: loaded from fieldgraph.yaml / FIELDGRAPH_CONFIG)
        schema: Live schema (default: built at startup from config.schema sources)
        title: FastAPI app title
        cors_origins: CORS allowed origins (default: all)
        init_database: Whether to create tables on startup

    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = load_config() or FieldgraphConfig()

    configure_database(config.database_url)
    set_aggregator(SettingsAggregator.from_config(config))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        _setup_logging_filter()
        if init_database:
            await init_db()
        live_schema = schema
        if live_schema is None:
            live_schema = await load_live_schema(config.schema.paths, config.schema.urls)
        set_schema(live_schema)
        logger.info(f"{title} started")

        yield

        # Shutdown
        await close_db()

    app = FastAPI(
        title=title,
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(IAMError)
    async def iam_error_handler(request: Request, exc: IAMError) -> JSONResponse:
        return JSONResponse(status_code=403, content={"error": str(exc)})

    app.include_router(router)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    return app
