"""Bandit strategy implementations."""

from arena_core.strategies.base import BaseBanditStrategy
from arena_core.strategies.epsilon_greedy import EpsilonGreedyStrategy
from arena_core.strategies.factory import StrategyFactory
from arena_core.strategies.random_choice import RandomStrategy
from arena_core.strategies.thompson import ThompsonSamplingStrategy
from arena_core.strategies.ucb import UCBStrategy

__all__ = [
    "BaseBanditStrategy",
    "EpsilonGreedyStrategy",
    "RandomStrategy",
    "StrategyFactory",
    "ThompsonSamplingStrategy",
    "UCBStrategy",
]
