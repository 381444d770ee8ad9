"""FastAPI application serving catalog search over HTTP."""

import json
import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from pydantic import TypeAdapter
import structlog

from .api import (
    search_router,
    sessions_router,
    catalog_router,
    health_router,
)
from .config import Settings, get_settings
from .engine_instance import catalog, sessions
from .models.response import ErrorResponse
from .models.search import SearchableItem

DESCRIPTION = "Multi-signal fuzzy search and ranking over a catalog of items"

settings = get_settings()
_catalog_adapter = TypeAdapter(list[SearchableItem])


def configure_logging(config: Settings) -> None:
    """Route structlog through stdlib logging, rendering JSON or console lines."""
    logging.basicConfig(format="%(message)s", level=config.log_level.upper())

    renderer = (
        structlog.processors.JSONRenderer()
        if config.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


configure_logging(settings)
logger = structlog.get_logger()


def load_catalog_file(path: str) -> int:
    """Replace the catalog with a JSON list of items read from disk."""
    with open(path, "r", encoding="utf-8") as f:
        items = _catalog_adapter.validate_python(json.load(f))
    catalog.load(items, replace=True)
    sessions.clear_caches()
    return len(items)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the configured catalog before serving requests."""
    logger.info("Catalog search starting", version=settings.app_version)

    if settings.catalog_path:
        try:
            total = load_catalog_file(settings.catalog_path)
        except FileNotFoundError:
            logger.warning("Catalog file missing, serving an empty catalog", path=settings.catalog_path)
        except Exception as e:
            logger.error("Catalog file could not be loaded", path=settings.catalog_path, error=str(e))
            raise
        else:
            logger.info("Catalog loaded", path=settings.catalog_path, total_items=total)

    yield

    logger.info("Catalog search stopped")


app = FastAPI(
    title=settings.app_name,
    description=DESCRIPTION,
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)

for router in (search_router, sessions_router, catalog_router, health_router):
    app.include_router(router)


@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log each request with its session and latency."""
    start_time = time.time()
    log = logger.bind(
        method=request.method,
        path=request.url.path,
        session_id=request.headers.get("x-session-id"),
    )
    log.info("Request started", client_ip=request.client.host if request.client else None)

    response = await call_next(request)

    log.info(
        "Request completed",
        status_code=response.status_code,
        process_time_ms=round((time.time() - start_time) * 1000, 2),
    )
    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn uncaught errors into an ErrorResponse body."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=True
    )

    body = ErrorResponse(
        error="Internal Server Error",
        message="An unexpected error occurred",
        details={"exception": str(exc)} if settings.debug else None
    )
    return JSONResponse(status_code=500, content=body.model_dump(mode="json"))


@app.get("/", summary="Service information", description="Name, version and endpoint map")
async def root() -> dict:
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": DESCRIPTION,
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
        "endpoints": {
            "search": "/api/v1/search/{query}",
            "did_you_mean": "/api/v1/did-you-mean/{query}",
            "catalog": "/api/v1/catalog",
            "interactions": "/api/v1/interactions",
            "session_suggestions": "/api/v1/sessions/{session_id}/suggestions",
            "analytics": "/api/v1/analytics",
            "stats": "/api/v1/stats",
        },
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
