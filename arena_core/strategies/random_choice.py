"""Uniform-random baseline strategy."""
from __future__ import annotations

from arena_core.state.base import PolicyState
from arena_core.strategies.base import BaseBanditStrategy


class RandomStrategy(BaseBanditStrategy):
    """Pick an arm uniformly at random every step.

    Every step counts as exploration and nothing is learned, which makes it
    the baseline the other strategies are measured against.
    """

    name = "random"
    label = "Random"
    color = "#ff6b6b"

    def initial_state(self) -> PolicyState:
        return PolicyState(self.n_arms)

    def select_arm(self) -> int:
        self.state.record(True)
        return self.generator.next_int(self.n_arms)

    def update(self, arm: int, reward: float) -> None:
        # Nothing to learn.
        return None
