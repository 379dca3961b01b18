"""Run every enabled algorithm of a request and collect its metrics."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from arena_core.config import SimulationConfig
from arena_core.rng import SeededGenerator
from arena_core.sim.environment import BernoulliBanditEnv
from arena_core.sim.metrics import PlotData, build_plot_data
from arena_core.sim.runner import drive
from arena_core.strategies.factory import StrategyFactory

logger = logging.getLogger(__name__)


class SimulationResult:
    """Per-algorithm plot data plus the echoed environment summary.

    ``plot_data`` is keyed by display label and ordered the way the
    algorithms ran.
    """

    def __init__(
        self,
        plot_data: Dict[str, PlotData],
        config: SimulationConfig,
    ) -> None:
        self.plot_data = plot_data
        self.config = config
        self.summary: Dict[str, Any] = {
            "probabilities": [float(p) for p in config.probabilities],
            "best_rate": config.best_rate,
            "n_arms": config.n_arms,
            "step_count": config.step_count,
        }

    @property
    def optimal_reward(self) -> int:
        """Expected total reward of always pulling the best arm, rounded."""
        return int(round(self.config.best_rate * self.config.step_count))

    def leaderboard(self) -> List[Tuple[str, float]]:
        """``(label, total_reward)`` pairs, best first; ties keep run order."""
        entries = [(label, data.total_reward) for label, data in self.plot_data.items()]
        return sorted(entries, key=lambda entry: entry[1], reverse=True)

    def winner(self) -> str:
        return self.leaderboard()[0][0]

    def efficiency(self, label: str) -> float:
        """Total reward of ``label`` as a percentage of the optimal reward."""
        optimal = self.optimal_reward
        if optimal == 0:
            return 0.0
        return self.plot_data[label].total_reward / optimal * 100.0

    @property
    def exceeds_optimal(self) -> bool:
        """True when luck pushed some run above the optimal expectation."""
        return any(data.total_reward > self.optimal_reward for data in self.plot_data.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "plot_data": {label: data.to_dict() for label, data in self.plot_data.items()},
            "summary": dict(self.summary),
            "optimal_reward": self.optimal_reward,
            "leaderboard": [
                {
                    "label": label,
                    "total_reward": reward,
                    "efficiency": self.efficiency(label),
                }
                for label, reward in self.leaderboard()
            ],
            "winner": self.winner(),
            "exceeds_optimal": self.exceeds_optimal,
        }


def run_simulation(
    config: SimulationConfig,
    generator: Optional[SeededGenerator] = None,
) -> SimulationResult:
    """Run each enabled algorithm against its own environment.

    The generator is reset to ``config.seed`` before every algorithm, so each
    one faces the same starting stream instead of continuing where the
    previous algorithm stopped.  The whole config is validated first; nothing
    runs if any part of it is invalid.
    """
    config.validate()
    generator = generator or SeededGenerator(config.seed)
    generator.seed(config.seed)

    factory = StrategyFactory(config)
    order = factory.resolve_order(config.enabled_algorithms)
    logger.info(
        "Running %d algorithm(s) on %d arms for %d steps (seed=%d)",
        len(order),
        config.n_arms,
        config.step_count,
        generator.initial_seed,
    )

    plot_data: Dict[str, PlotData] = {}
    for name in order:
        generator.reset()
        env = BernoulliBanditEnv(config.probabilities, generator)
        strategy = factory.build(name, generator)
        run = drive(env, strategy, config.step_count)
        data = build_plot_data(strategy, run, env.best_rate)
        logger.debug(
            "%s finished: total_reward=%s final_regret=%.2f",
            strategy.label,
            data.total_reward,
            data.cumulative_regret[-1],
        )
        plot_data[strategy.label] = data

    return SimulationResult(plot_data, config)
