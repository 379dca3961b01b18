"""Thompson Sampling for Bernoulli (Beta-distributed) rewards."""
from __future__ import annotations

from typing import Any

from arena_core.rng import SeededGenerator
from arena_core.state.arms import BetaPosteriorState, argmax
from arena_core.strategies.base import BaseBanditStrategy


class ThompsonSamplingStrategy(BaseBanditStrategy):
    """Beta–Bernoulli Thompson Sampling.

    Each arm maintains ``alpha`` (successes + prior) and ``beta`` (failures +
    prior) parameters for a Beta distribution.  At decision time a sample is
    drawn from each arm's posterior, in arm order, and the arm with the
    highest sample wins.  The step counts as exploration when that arm is not
    the one with the highest posterior mean.
    """

    name = "thompson"
    label = "Thompson"
    color = "#9b5de5"

    def __init__(
        self,
        n_arms: int,
        generator: SeededGenerator,
        *,
        prior_alpha: float = 1.0,
        prior_beta: float = 1.0,
        **kwargs: Any,
    ) -> None:
        self.prior_alpha = prior_alpha
        self.prior_beta = prior_beta
        super().__init__(n_arms, generator, **kwargs)

    def initial_state(self) -> BetaPosteriorState:
        return BetaPosteriorState(self.n_arms, self.prior_alpha, self.prior_beta)

    def params(self) -> dict[str, Any]:
        return {"prior_alpha": self.prior_alpha, "prior_beta": self.prior_beta}

    # -- core API -------------------------------------------------------------

    def select_arm(self) -> int:
        state = self.state
        greedy_arm = state.greedy_arm()

        samples = [
            self.generator.beta_sample(alpha, beta)
            for alpha, beta in zip(state.alphas, state.betas)
        ]
        best_arm = argmax(samples)

        state.record(best_arm != greedy_arm)
        return best_arm

    def update(self, arm: int, reward: float) -> None:
        self.state.update(arm, reward)
