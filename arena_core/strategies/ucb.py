"""UCB1 (Upper Confidence Bound) strategy."""
from __future__ import annotations

import math
from typing import Any

from arena_core.errors import InvalidParameter
from arena_core.rng import SeededGenerator
from arena_core.state.arms import EmpiricalMeanState, argmax
from arena_core.strategies.base import BaseBanditStrategy


class UCBStrategy(BaseBanditStrategy):
    r"""UCB1 algorithm (Auer et al., 2002).

    After every arm has been pulled once (lowest index first), the arm with
    the highest index is chosen:

    .. math::

        \text{UCB}_i = \bar{x}_i + c \sqrt{\frac{2 \ln t}{n_i}}

    where :math:`\bar{x}_i` is the empirical mean, :math:`n_i` is the pull
    count for arm *i*, *t* is the total number of pulls across all arms
    (floored at 1), and *c* is the ``exploration_weight``.

    A step is flagged as exploration when the chosen arm differs from the
    arm with the best empirical mean.  The flag is diagnostic only.
    """

    name = "ucb"
    label = "UCB"
    color = "#00f5d4"

    def __init__(
        self,
        n_arms: int,
        generator: SeededGenerator,
        *,
        exploration_weight: float = 1.0,
        **kwargs: Any,
    ) -> None:
        if exploration_weight < 0:
            raise InvalidParameter(
                f"exploration_weight must be >= 0, got {exploration_weight}"
            )
        self.c = float(exploration_weight)
        super().__init__(n_arms, generator, **kwargs)

    def initial_state(self) -> EmpiricalMeanState:
        return EmpiricalMeanState(self.n_arms)

    def params(self) -> dict[str, Any]:
        return {"c": self.c}

    # -- core API -------------------------------------------------------------

    def select_arm(self) -> int:
        state = self.state

        # Phase 1: play each arm once, in index order
        unplayed = state.first_unpulled()
        if unplayed is not None:
            state.record(True)
            return unplayed

        log_total = math.log(max(1, state.total_pulls))
        ucb_values = [
            mean + self.c * math.sqrt(2.0 * log_total / n_i)
            for mean, n_i in zip(state.avg_rewards, state.pulls)
        ]

        best_arm = argmax(ucb_values)
        state.record(best_arm != state.greedy_arm())
        return best_arm

    def update(self, arm: int, reward: float) -> None:
        self.state.update(arm, reward)
