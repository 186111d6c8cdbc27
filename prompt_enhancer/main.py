"""Prompt Enhancer API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PromptEnhancerError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Error handlers live in api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prompt_enhancer.api.error_handlers import register_error_handlers
from prompt_enhancer.api.routes import health, prompt_tools
from prompt_enhancer.config import get_settings
from prompt_enhancer.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.service_name} API started")
    yield
    logger.info(f"{settings.service_name} API shutting down")


settings = get_settings()
app = FastAPI(
    title="Prompt Enhancer API", version=settings.service_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(prompt_tools.router)

register_error_handlers(app)
