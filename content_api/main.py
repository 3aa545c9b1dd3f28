"""Content API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"message": ...}
    - CORS open to configured origins (default "*") for the CRUD methods
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: teardown runs after uvicorn has stopped
      accepting connections and drained in-flight requests, so the engine is
      never disposed while a handler may still use it
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from content_api.api.error_handlers import register_error_handlers
from content_api.api.routes import contents, health, root
from content_api.config import get_settings
from content_api.infrastructure.database import close_db, init_db
from content_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Content API started")
    try:
        yield
    finally:
        logger.info("Content API shutting down, releasing database")
        await close_db()


app = FastAPI(title="Content API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=CORS_METHODS,
    allow_headers=["*"],
)

app.include_router(root.router)
app.include_router(health.router)
app.include_router(contents.router)

register_error_handlers(app)
