"""Blogsphere API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BlogsphereError → {"error": message}
    - CORS configured from settings (not hardcoded)
    - MongoDB client created on startup via lifespan; an unreachable database is logged,
      never fatal (requests fail at the store until it recovers)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Store kept on app.state and injected with Depends(get_submission_store)
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from blogsphere.api.error_handlers import register_error_handlers
from blogsphere.api.routes import contact, health, newsletter
from blogsphere.config import get_settings
from blogsphere.infrastructure.database import (
    MongoSubmissionStore, create_mongo_client,
)
from blogsphere.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    client = create_mongo_client(
        settings.mongo_uri, settings.mongo_server_selection_timeout_ms,
    )
    store = MongoSubmissionStore.from_client(client, settings.mongo_database)
    app.state.submission_store = store
    if await store.ping():
        logger.info("MongoDB connected")
    else:
        logger.error("MongoDB unreachable at startup; submissions will fail until it recovers")
    logger.info("Blogsphere API started", extra={"port": settings.port})
    if not os.path.isdir(settings.static_dir):
        logger.warning(
            "Static directory not found; static serving disabled",
            extra={"static_dir": settings.static_dir},
        )
    yield
    logger.info("Blogsphere API shutting down")
    await client.close()


app = FastAPI(
    title="Blogsphere API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(newsletter.router)
app.include_router(contact.router)

# Mounted AFTER API routes so /api/* takes precedence
if os.path.isdir(settings.static_dir):
    app.mount(
        "/", StaticFiles(directory=settings.static_dir, html=True),
        name="static",
    )
