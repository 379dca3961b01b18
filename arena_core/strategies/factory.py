"""Factory for selecting and constructing bandit strategy instances."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from arena_core.errors import ConfigurationError
from arena_core.rng import SeededGenerator
from arena_core.strategies.base import BaseBanditStrategy
from arena_core.strategies.epsilon_greedy import EpsilonGreedyStrategy
from arena_core.strategies.random_choice import RandomStrategy
from arena_core.strategies.thompson import ThompsonSamplingStrategy
from arena_core.strategies.ucb import UCBStrategy

if TYPE_CHECKING:
    from arena_core.config import SimulationConfig


class StrategyFactory:
    """Resolve strategy names and build strategies from a simulation config."""

    # Canonical run order of a multi-algorithm request.
    SUPPORTED_STRATEGIES: tuple[str, ...] = ("random", "ucb", "epsilon_greedy", "thompson")

    STRATEGY_CLASSES: dict[str, type[BaseBanditStrategy]] = {
        "random": RandomStrategy,
        "ucb": UCBStrategy,
        "epsilon_greedy": EpsilonGreedyStrategy,
        "thompson": ThompsonSamplingStrategy,
    }

    def __init__(self, config: SimulationConfig) -> None:
        self.config = config

    @staticmethod
    def normalize_strategy_name(name: str) -> str:
        val = name.strip().lower().replace("-", "_").replace(" ", "_")
        aliases = {
            "baseline": "random",
            "uniform": "random",
            "ucb1": "ucb",
            "upper_confidence_bound": "ucb",
            "epsilon": "epsilon_greedy",
            "eps_greedy": "epsilon_greedy",
            "ε_greedy": "epsilon_greedy",
            "ts": "thompson",
            "thompson_sampling": "thompson",
        }
        return aliases.get(val, val)

    @classmethod
    def validate_strategy_name(cls, name: str) -> str:
        normalized = cls.normalize_strategy_name(name)
        if normalized not in cls.STRATEGY_CLASSES:
            raise ConfigurationError(
                f"Unsupported algorithm '{name}'. "
                f"Valid values: {', '.join(cls.SUPPORTED_STRATEGIES)}."
            )
        return normalized

    @classmethod
    def resolve_order(cls, names: Iterable[str]) -> list[str]:
        """Normalize, de-duplicate and sort names into canonical run order."""
        requested = {cls.validate_strategy_name(name) for name in names}
        return [name for name in cls.SUPPORTED_STRATEGIES if name in requested]

    def strategy_params(self, name: str) -> dict[str, Any]:
        normalized = self.validate_strategy_name(name)
        config = self.config
        if normalized == "ucb":
            return {"exploration_weight": config.ucb_exploration_constant}
        if normalized == "epsilon_greedy":
            return {
                "epsilon": config.epsilon,
                "decay": config.epsilon_decay,
                "min_epsilon": config.min_epsilon,
            }
        if normalized == "thompson":
            return {
                "prior_alpha": config.thompson_prior_alpha,
                "prior_beta": config.thompson_prior_beta,
            }
        return {}

    def build(self, name: str, generator: SeededGenerator) -> BaseBanditStrategy:
        normalized = self.validate_strategy_name(name)
        strategy_cls = self.STRATEGY_CLASSES[normalized]
        return strategy_cls(self.config.n_arms, generator, **self.strategy_params(normalized))
