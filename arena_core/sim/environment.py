"""Bernoulli reward environment driven by the run's seeded generator."""
from __future__ import annotations

from typing import Sequence

from arena_core.config import validate_probabilities
from arena_core.errors import InvalidParameter
from arena_core.rng import SeededGenerator
from arena_core.state.arms import argmax


class BernoulliBanditEnv:
    """Simulates a set of arms with fixed (but hidden) success rates.

    Parameters
    ----------
    arm_rates : sequence of float
        Success probability of each arm, in arm-index order.
    generator : SeededGenerator
        Shared draw stream; every :meth:`pull` consumes exactly one uniform.
    """

    def __init__(self, arm_rates: Sequence[float], generator: SeededGenerator) -> None:
        self._arm_rates = validate_probabilities(arm_rates)
        self.generator = generator
        self.best_arm = argmax(list(self._arm_rates))
        self.best_rate = self._arm_rates[self.best_arm]

    def __repr__(self) -> str:
        return f"BernoulliBanditEnv(arm_rates={list(self._arm_rates)!r})"

    @property
    def arm_rates(self) -> tuple[float, ...]:
        return self._arm_rates

    @property
    def n_arms(self) -> int:
        return len(self._arm_rates)

    def pull(self, arm: int) -> int:
        """Draw a Bernoulli reward (0 or 1) for the given arm."""
        if not 0 <= arm < self.n_arms:
            raise InvalidParameter(f"arm index {arm} out of range for {self.n_arms} arms")
        return 1 if self.generator.next_uniform() < self._arm_rates[arm] else 0

    def regret(self, arm: int) -> float:
        """Instantaneous expected regret from choosing *arm* instead of the best."""
        if not 0 <= arm < self.n_arms:
            raise InvalidParameter(f"arm index {arm} out of range for {self.n_arms} arms")
        return self.best_rate - self._arm_rates[arm]
