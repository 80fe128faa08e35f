# main.py
from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, ORJSONResponse

# Import logging utilities early so that the logger configuration is
# applied before any other modules emit log messages.
from catalog.logging_config import log_event, logger

from catalog.clients.item_store import JsonItemStore
from catalog.core.config import Settings, get_settings
from catalog.core.errors import SourceUnavailable
from catalog.routes.items import router as items_router
from catalog.routes.stats import router as stats_router
from catalog.services.stats_cache import StatsCache


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logger.setLevel(settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # one store and one statistics cache per process
        store = JsonItemStore(settings.data_path)
        app.state.settings = settings
        app.state.item_store = store
        app.state.stats_cache = StatsCache(store, ttl=settings.stats_cache_ttl_seconds)
        log_event(
            "startup",
            data_path=str(settings.data_path),
            stats_cache_ttl_s=settings.stats_cache_ttl_seconds,
        )
        yield
        log_event("shutdown")

    app = FastAPI(title="Catalog API", default_response_class=ORJSONResponse, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(items_router)
    app.include_router(stats_router)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    # -----------------------------------------------------------------
    # Error surfaces: terse bodies for clients, details in the logs
    # -----------------------------------------------------------------
    @app.exception_handler(SourceUnavailable)
    async def source_unavailable_handler(request: Request, exc: SourceUnavailable):
        log_event("source_unavailable", level=logging.ERROR, path=request.url.path, detail=str(exc))
        return JSONResponse(status_code=503, content={"detail": "Source unavailable", "hint": str(exc)[:200]})

    @app.exception_handler(RequestValidationError)
    async def validation_exc_handler(request: Request, exc: RequestValidationError):
        # the rejected input is not echoed back: it may be NaN or Infinity,
        # which strict JSON cannot encode
        errors = [{k: v for k, v in err.items() if k not in ("input", "ctx")} for err in exc.errors()]
        return JSONResponse(
            status_code=422,
            content={"detail": "Validation error", "errors": jsonable_encoder(errors)},
        )

    @app.exception_handler(Exception)
    async def unhandled_exc_handler(request: Request, exc: Exception):
        logger.error(f"unhandled error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Server error"})

    # -----------------------------------------------------------------
    # Request logging middleware
    # -----------------------------------------------------------------
    # Records path, method, status and processing time of every request.
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000
        log_event(
            "http_request",
            path=request.url.path,
            method=request.method,
            status=response.status_code,
            duration_ms=round(duration_ms, 2),
        )
        return response

    return app


app = create_app()
