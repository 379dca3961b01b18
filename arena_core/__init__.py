"""arena_core – deterministic multi-armed bandit simulation engine."""
from arena_core.config import SimulationConfig
from arena_core.errors import BanditError, ConfigurationError, InvalidParameter
from arena_core.rng import SeededGenerator
from arena_core.sim.environment import BernoulliBanditEnv
from arena_core.sim.runner import RunResult, drive
from arena_core.sim.simulation import SimulationResult, run_simulation
from arena_core.strategies.base import BaseBanditStrategy
from arena_core.strategies.epsilon_greedy import EpsilonGreedyStrategy
from arena_core.strategies.factory import StrategyFactory
from arena_core.strategies.random_choice import RandomStrategy
from arena_core.strategies.thompson import ThompsonSamplingStrategy
from arena_core.strategies.ucb import UCBStrategy

__all__ = [
    "BanditError",
    "BaseBanditStrategy",
    "BernoulliBanditEnv",
    "ConfigurationError",
    "EpsilonGreedyStrategy",
    "InvalidParameter",
    "RandomStrategy",
    "RunResult",
    "SeededGenerator",
    "SimulationConfig",
    "SimulationResult",
    "StrategyFactory",
    "ThompsonSamplingStrategy",
    "UCBStrategy",
    "drive",
    "run_simulation",
]
