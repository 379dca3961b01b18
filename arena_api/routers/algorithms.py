"""Discovery endpoint listing the algorithms a simulation can enable."""
from __future__ import annotations

from fastapi import APIRouter

from arena_api.models import AlgorithmInfo
from arena_core.config import SimulationConfig
from arena_core.strategies.factory import StrategyFactory

router = APIRouter(tags=["algorithms"])


@router.get("/algorithms", response_model=list[AlgorithmInfo])
def list_algorithms() -> list[AlgorithmInfo]:
    factory = StrategyFactory(SimulationConfig())
    return [
        AlgorithmInfo(
            name=name,
            label=factory.STRATEGY_CLASSES[name].label,
            color=factory.STRATEGY_CLASSES[name].color,
            default_params=factory.strategy_params(name),
        )
        for name in factory.SUPPORTED_STRATEGIES
    ]
