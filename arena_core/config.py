"""Simulation request configuration and its validation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from arena_core.errors import ConfigurationError, InvalidParameter
from arena_core.rng import DEFAULT_SEED
from arena_core.strategies.factory import StrategyFactory

DEFAULT_PROBABILITIES: tuple[float, ...] = (0.1, 0.3, 0.5, 0.7, 0.9)
DEFAULT_ALGORITHMS: tuple[str, ...] = StrategyFactory.SUPPORTED_STRATEGIES


def validate_probabilities(probabilities: Sequence[float]) -> tuple[float, ...]:
    """Return the probabilities as floats, rejecting bad arm definitions."""
    probs = tuple(float(p) for p in probabilities)
    if len(probs) < 2:
        raise ConfigurationError(f"at least two arms are required, got {len(probs)}")
    for idx, p in enumerate(probs):
        # NaN fails both comparisons.
        if not 0.0 <= p <= 1.0:
            raise InvalidParameter(f"probability of arm {idx} must be in [0, 1], got {p}")
    return probs


@dataclass
class SimulationConfig:
    """Everything needed to reproduce one simulation request.

    ``enabled_algorithms`` accepts the names and aliases understood by
    :class:`~arena_core.strategies.factory.StrategyFactory`; they always run
    in the factory's canonical order regardless of how they are listed.
    """

    probabilities: Sequence[float] = DEFAULT_PROBABILITIES
    step_count: int = 1000
    enabled_algorithms: Sequence[str] = field(default_factory=lambda: list(DEFAULT_ALGORITHMS))
    ucb_exploration_constant: float = 1.0
    epsilon: float = 0.1
    epsilon_decay: bool = False
    min_epsilon: float = 0.0
    thompson_prior_alpha: float = 1.0
    thompson_prior_beta: float = 1.0
    seed: int = DEFAULT_SEED

    def validate(self) -> None:
        """Reject the whole request before any algorithm runs."""
        validate_probabilities(self.probabilities)
        if self.step_count <= 0:
            raise InvalidParameter(f"step_count must be > 0, got {self.step_count}")
        if not self.enabled_algorithms:
            raise ConfigurationError("at least one algorithm must be enabled")
        for name in self.enabled_algorithms:
            StrategyFactory.validate_strategy_name(name)
        if self.ucb_exploration_constant < 0:
            raise InvalidParameter(
                f"ucb_exploration_constant must be >= 0, got {self.ucb_exploration_constant}"
            )
        if not 0.0 <= self.epsilon <= 1.0:
            raise InvalidParameter(f"epsilon must be in [0, 1], got {self.epsilon}")
        if not 0.0 <= self.min_epsilon <= 1.0:
            raise InvalidParameter(f"min_epsilon must be in [0, 1], got {self.min_epsilon}")
        if self.thompson_prior_alpha <= 0:
            raise InvalidParameter(
                f"thompson_prior_alpha must be > 0, got {self.thompson_prior_alpha}"
            )
        if self.thompson_prior_beta <= 0:
            raise InvalidParameter(
                f"thompson_prior_beta must be > 0, got {self.thompson_prior_beta}"
            )

    @property
    def n_arms(self) -> int:
        return len(self.probabilities)

    @property
    def best_rate(self) -> float:
        return max(float(p) for p in self.probabilities)

    def to_dict(self) -> dict[str, Any]:
        return {
            "probabilities": [float(p) for p in self.probabilities],
            "step_count": self.step_count,
            "enabled_algorithms": list(self.enabled_algorithms),
            "ucb_exploration_constant": self.ucb_exploration_constant,
            "epsilon": self.epsilon,
            "epsilon_decay": self.epsilon_decay,
            "min_epsilon": self.min_epsilon,
            "thompson_prior_alpha": self.thompson_prior_alpha,
            "thompson_prior_beta": self.thompson_prior_beta,
            "seed": self.seed,
        }
