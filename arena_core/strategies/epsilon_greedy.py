"""Epsilon-Greedy strategy with optional exploration decay."""

from __future__ import annotations

import math
from typing import Any

from arena_core.errors import InvalidParameter
from arena_core.rng import SeededGenerator
from arena_core.state.arms import EmpiricalMeanState
from arena_core.strategies.base import BaseBanditStrategy


class EpsilonGreedyStrategy(BaseBanditStrategy):
    """Classic Epsilon-Greedy.

    Every arm is pulled once first (lowest index first).  Afterwards, with
    probability ``epsilon`` a random arm is chosen (explore); otherwise the
    arm with the highest observed mean reward is selected (exploit).

    With ``decay=True`` the rate shrinks after every update to
    ``max(min_epsilon, epsilon / sqrt(total_pulls))``.
    """

    name = "epsilon_greedy"
    label = "ε-Greedy"
    color = "#ffd93d"

    def __init__(
        self,
        n_arms: int,
        generator: SeededGenerator,
        *,
        epsilon: float = 0.1,
        decay: bool = False,
        min_epsilon: float = 0.0,
        **kwargs: Any,
    ) -> None:
        if not 0.0 <= epsilon <= 1.0:
            raise InvalidParameter(f"epsilon must be in [0, 1], got {epsilon}")
        if not 0.0 <= min_epsilon <= 1.0:
            raise InvalidParameter(f"min_epsilon must be in [0, 1], got {min_epsilon}")
        self.initial_epsilon = float(epsilon)
        self.epsilon = self.initial_epsilon
        self.decay = bool(decay)
        self.min_epsilon = float(min_epsilon)
        super().__init__(n_arms, generator, **kwargs)

    def initial_state(self) -> EmpiricalMeanState:
        return EmpiricalMeanState(self.n_arms)

    def params(self) -> dict[str, Any]:
        return {
            "epsilon": self.initial_epsilon,
            "decay": self.decay,
            "min_epsilon": self.min_epsilon,
        }

    def reset(self) -> None:
        super().reset()
        self.epsilon = self.initial_epsilon

    def stats(self) -> dict[str, Any]:
        return {**super().stats(), "current_epsilon": self.epsilon}

    # -- core API -------------------------------------------------------------

    def select_arm(self) -> int:
        state = self.state

        unplayed = state.first_unpulled()
        if unplayed is not None:
            state.record(True)
            return unplayed

        # Explore
        if self.generator.next_uniform() < self.epsilon:
            state.record(True)
            return self.generator.next_int(self.n_arms)

        # Exploit – pick the arm with the highest empirical mean
        state.record(False)
        return state.greedy_arm()

    def update(self, arm: int, reward: float) -> None:
        self.state.update(arm, reward)
        if self.decay:
            self.epsilon = max(
                self.min_epsilon,
                self.initial_epsilon / math.sqrt(self.state.total_pulls),
            )
