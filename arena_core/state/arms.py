"""Per-arm statistics for count-based and Bayesian strategies."""
from __future__ import annotations

from arena_core.errors import InvalidParameter
from arena_core.state.base import PolicyState


def argmax(values: list[float]) -> int:
    """Index of the largest value; the lowest index wins ties."""
    best_idx = 0
    best_val = values[0]
    for idx in range(1, len(values)):
        if values[idx] > best_val:
            best_val = values[idx]
            best_idx = idx
    return best_idx


class EmpiricalMeanState(PolicyState):
    """Pull counts and running mean reward per arm.

    Used by UCB and epsilon-greedy.  Means are updated incrementally so no
    reward sums are kept.
    """

    def __init__(self, n_arms: int) -> None:
        super().__init__(n_arms)
        self.pulls: list[int] = [0] * n_arms
        self.avg_rewards: list[float] = [0.0] * n_arms
        self.total_pulls = 0

    def first_unpulled(self) -> int | None:
        """Lowest-indexed arm that has never been pulled, if any."""
        for arm, count in enumerate(self.pulls):
            if count == 0:
                return arm
        return None

    def greedy_arm(self) -> int:
        return argmax(self.avg_rewards)

    def update(self, arm: int, reward: float) -> None:
        self.check_arm(arm)
        self.total_pulls += 1
        self.pulls[arm] += 1
        n = self.pulls[arm]
        prev = self.avg_rewards[arm]
        self.avg_rewards[arm] = prev + (reward - prev) / n

    def clear(self) -> None:
        super().clear()
        self.pulls = [0] * self.n_arms
        self.avg_rewards = [0.0] * self.n_arms
        self.total_pulls = 0


class BetaPosteriorState(PolicyState):
    """Beta(alpha, beta) posterior per arm for Bernoulli rewards."""

    def __init__(self, n_arms: int, prior_alpha: float = 1.0, prior_beta: float = 1.0) -> None:
        super().__init__(n_arms)
        if prior_alpha <= 0:
            raise InvalidParameter(f"prior_alpha must be > 0, got {prior_alpha}")
        if prior_beta <= 0:
            raise InvalidParameter(f"prior_beta must be > 0, got {prior_beta}")
        self.prior_alpha = float(prior_alpha)
        self.prior_beta = float(prior_beta)
        self.alphas: list[float] = [self.prior_alpha] * n_arms
        self.betas: list[float] = [self.prior_beta] * n_arms

    def posterior_means(self) -> list[float]:
        return [a / (a + b) for a, b in zip(self.alphas, self.betas)]

    def greedy_arm(self) -> int:
        return argmax(self.posterior_means())

    @property
    def pulls(self) -> list[int]:
        """Observations per arm, recovered from the pseudo-counts."""
        return [
            int(round(a - self.prior_alpha + b - self.prior_beta))
            for a, b in zip(self.alphas, self.betas)
        ]

    def update(self, arm: int, reward: float) -> None:
        # Unit conjugate update: any positive reward counts as a success.
        self.check_arm(arm)
        if reward > 0:
            self.alphas[arm] += 1.0
        else:
            self.betas[arm] += 1.0

    def clear(self) -> None:
        super().clear()
        self.alphas = [self.prior_alpha] * self.n_arms
        self.betas = [self.prior_beta] * self.n_arms
