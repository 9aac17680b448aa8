# -*- coding: utf-8 -*-
"""
digestlog HTTP API

Symptom log for bowel movements: create, list and delete entries.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import settings
from .logs.api import router as logs_router
from .logs.storage import LogStore


def create_app(store: Optional[LogStore] = None) -> FastAPI:
    """Build the application around `store` (defaults to `settings.db_path`)."""
    store = store or LogStore(settings.db_path)

    app = FastAPI(
        title="digestlog",
        description="Personal digestive symptom log",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.store = store

    # Ensure the table exists even when lifespan events are not triggered (e.g. some test clients).
    store.initialize()

    @app.on_event("startup")
    def _startup_init_store() -> None:
        store.initialize()

    @app.on_event("shutdown")
    def _shutdown_close_store() -> None:
        store.close()

    @app.get("/api/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(logs_router)
    return app


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    uvicorn.run("digestlog.api:create_app", factory=True, host=settings.host, port=settings.port, reload=False)
