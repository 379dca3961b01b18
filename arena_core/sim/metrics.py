"""Derived statistics computed from completed runs."""
from __future__ import annotations

from typing import Any, Dict, List, NamedTuple, Optional, Sequence

import numpy as np

from arena_core.errors import InvalidParameter
from arena_core.sim.runner import RunResult
from arena_core.strategies.base import BaseBanditStrategy


class PlotData(NamedTuple):
    """Everything a chart or table needs about one strategy's run."""

    label: str
    color: str
    timesteps: List[int]
    cumulative_reward: List[float]
    cumulative_regret: List[float]
    exploration_rate: Optional[List[float]]
    arm_pull_histogram: List[int]
    total_reward: float
    stats: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return self._asdict()


def cumulative_reward(rewards: Sequence[float]) -> List[float]:
    """Prefix sums of the per-step rewards."""
    return np.cumsum(np.asarray(rewards)).tolist()


def cumulative_regret(cum_rewards: Sequence[float], best_rate: float) -> List[float]:
    """Expected reward of always playing the best arm minus what was earned.

    Values may dip below zero when a run gets lucky; they are kept as-is.
    """
    cum = np.asarray(cum_rewards, dtype=float)
    steps = np.arange(1, len(cum) + 1)
    return (steps * best_rate - cum).tolist()


def exploration_rate(exploration_history: Sequence[bool]) -> List[float]:
    """Running fraction of steps that were flagged as exploration."""
    flags = np.asarray(exploration_history, dtype=float)
    steps = np.arange(1, len(flags) + 1)
    return (np.cumsum(flags) / steps).tolist()


def arm_pull_histogram(chosen_arms: Sequence[int], n_arms: int) -> List[int]:
    """Number of pulls per arm index; sums to ``len(chosen_arms)``."""
    arms = np.asarray(chosen_arms, dtype=np.int64)
    if arms.size and (arms.min() < 0 or arms.max() >= n_arms):
        raise InvalidParameter(f"chosen arms must lie in [0, {n_arms})")
    return np.bincount(arms, minlength=n_arms).tolist()


def total_reward(rewards: Sequence[float]) -> float:
    return np.asarray(rewards).sum().item() if len(rewards) else 0


def build_plot_data(
    strategy: BaseBanditStrategy,
    run: RunResult,
    best_rate: float,
) -> PlotData:
    """Turn one strategy's raw run into :class:`PlotData`."""
    cum_rewards = cumulative_reward(run.rewards)
    history = strategy.exploration_history
    return PlotData(
        label=strategy.label,
        color=strategy.color,
        timesteps=list(range(1, len(run.rewards) + 1)),
        cumulative_reward=cum_rewards,
        cumulative_regret=cumulative_regret(cum_rewards, best_rate),
        exploration_rate=exploration_rate(history) if history is not None else None,
        arm_pull_histogram=arm_pull_histogram(run.chosen_arms, strategy.n_arms),
        total_reward=total_reward(run.rewards),
        stats=strategy.stats(),
    )
