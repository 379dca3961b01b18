"""Simulation endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request, status

from arena_api.models import ProbabilitiesResponse, SimulationRequest, SimulationResponse
from arena_core.errors import BanditError
from arena_core.sim.presets import MAX_ARMS, MIN_ARMS, random_probabilities
from arena_core.sim.simulation import run_simulation

logger = logging.getLogger(__name__)

router = APIRouter(tags=["simulations"])


@router.post("/simulations", response_model=SimulationResponse)
def create_simulation(payload: SimulationRequest, request: Request) -> SimulationResponse:
    settings = request.app.state.settings

    if payload.step_count > settings.max_steps:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"step_count {payload.step_count} exceeds the limit of {settings.max_steps}.",
        )

    config = payload.to_config(default_seed=settings.default_seed)
    try:
        result = run_simulation(config)
    except BanditError as exc:
        logger.info("Rejected simulation request: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    return SimulationResponse(seed=config.seed, **result.to_dict())


@router.get("/probabilities/random", response_model=ProbabilitiesResponse)
def get_random_probabilities(
    n_arms: int = Query(5, ge=MIN_ARMS, le=MAX_ARMS),
    seed: Optional[int] = Query(None, ge=0),
) -> ProbabilitiesResponse:
    return ProbabilitiesResponse(
        n_arms=n_arms,
        probabilities=random_probabilities(n_arms, seed=seed),
    )
