"""FastAPI entrypoint for the bandit simulation service."""
from __future__ import annotations

import logging
from typing import Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from arena_api.routers import algorithms as algorithms_router
from arena_api.routers import simulations as simulations_router
from arena_api.settings import Settings

logger = logging.getLogger(__name__)


def create_app(*, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI app.

    An explicit ``settings`` object makes this function test-friendly.
    """
    app_settings = settings or Settings()
    logging.getLogger("arena_core").setLevel(app_settings.log_level.upper())
    logging.getLogger("arena_api").setLevel(app_settings.log_level.upper())

    app = FastAPI(
        title="Multi-Armed Bandit Arena",
        version="0.1.0",
        description="Seeded, reproducible bandit algorithm comparisons.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = app_settings

    app.include_router(simulations_router.router)
    app.include_router(algorithms_router.router)

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    logger.info(
        "Simulation API ready (default_seed=%d, max_steps=%d)",
        app_settings.default_seed,
        app_settings.max_steps,
    )
    return app


app = create_app()
