"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from cutoff_checker.api.routes import cutoffs, health
from cutoff_checker.core.config import AppSettings
from cutoff_checker.core.logger import setup_logger
from cutoff_checker.engine.cutoff_engine import CutoffEngine
from cutoff_checker.engine.factory import create_engine


def create_app(settings: AppSettings | None = None, engine: CutoffEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``engine`` may be injected (tests); otherwise one is built from settings
    when the app starts.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        resolved = settings or AppSettings()
        logger = setup_logger(resolved.log_level)
        app.state.settings = resolved
        app.state.engine = engine or create_engine(resolved)
        app.state.calendar = app.state.engine.evaluator.calendar
        logger.info("Cutoff checker started (environment=%s)", resolved.environment)
        yield

    app = FastAPI(
        title="Bank Cutoff Time Checker",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(cutoffs.router)
    return app
