"""Step loop driving one strategy against one environment."""
from __future__ import annotations

from typing import List, NamedTuple

from arena_core.errors import InvalidParameter
from arena_core.sim.environment import BernoulliBanditEnv
from arena_core.strategies.base import BaseBanditStrategy


class RunResult(NamedTuple):
    """Per-step outcome of a run; both lists are indexed by step."""

    rewards: List[int]
    chosen_arms: List[int]


def drive(
    env: BernoulliBanditEnv,
    strategy: BaseBanditStrategy,
    step_count: int,
) -> RunResult:
    """Run a strategy against an environment for ``step_count`` steps.

    Each step is select → pull → update, strictly in that order, so the
    draw stream the strategy and environment share is consumed identically
    on every replay with the same seed.
    """
    if step_count <= 0:
        raise InvalidParameter(f"step_count must be > 0, got {step_count}")

    rewards: List[int] = []
    chosen_arms: List[int] = []

    for _ in range(step_count):
        arm = strategy.select_arm()
        reward = env.pull(arm)
        strategy.update(arm, reward)

        rewards.append(reward)
        chosen_arms.append(arm)

    return RunResult(rewards, chosen_arms)
