"""Tests for StrategyFactory name resolution and construction."""
from __future__ import annotations

import unittest

from arena_core.config import SimulationConfig
from arena_core.errors import ConfigurationError
from arena_core.rng import SeededGenerator
from arena_core.strategies.epsilon_greedy import EpsilonGreedyStrategy
from arena_core.strategies.factory import StrategyFactory
from arena_core.strategies.random_choice import RandomStrategy
from arena_core.strategies.thompson import ThompsonSamplingStrategy
from arena_core.strategies.ucb import UCBStrategy


class TestStrategyFactory(unittest.TestCase):
    def test_alias_resolution(self) -> None:
        cases = {
            "UCB1": "ucb",
            "ucb": "ucb",
            "Epsilon-Greedy": "epsilon_greedy",
            "eps_greedy": "epsilon_greedy",
            "TS": "thompson",
            "Thompson Sampling": "thompson",
            "baseline": "random",
            " Random ": "random",
        }
        for raw, expected in cases.items():
            self.assertEqual(StrategyFactory.validate_strategy_name(raw), expected)

    def test_unknown_name_rejected(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            StrategyFactory.validate_strategy_name("softmax")
        self.assertIn("softmax", str(ctx.exception))

    def test_resolve_order_is_canonical_and_unique(self) -> None:
        order = StrategyFactory.resolve_order(["thompson", "UCB1", "random", "ts"])
        self.assertEqual(order, ["random", "ucb", "thompson"])

    def test_build_passes_config_parameters(self) -> None:
        config = SimulationConfig(
            probabilities=[0.2, 0.4, 0.6],
            ucb_exploration_constant=2.0,
            epsilon=0.3,
            epsilon_decay=True,
            min_epsilon=0.02,
            thompson_prior_alpha=3.0,
            thompson_prior_beta=4.0,
        )
        factory = StrategyFactory(config)
        gen = SeededGenerator(1)

        ucb = factory.build("ucb", gen)
        self.assertIsInstance(ucb, UCBStrategy)
        self.assertEqual(ucb.c, 2.0)
        self.assertEqual(ucb.n_arms, 3)

        eps = factory.build("epsilon", gen)
        self.assertIsInstance(eps, EpsilonGreedyStrategy)
        self.assertEqual((eps.initial_epsilon, eps.decay, eps.min_epsilon), (0.3, True, 0.02))

        ts = factory.build("thompson", gen)
        self.assertIsInstance(ts, ThompsonSamplingStrategy)
        self.assertEqual(ts.state.alphas, [3.0, 3.0, 3.0])
        self.assertEqual(ts.state.betas, [4.0, 4.0, 4.0])

        self.assertIsInstance(factory.build("random", gen), RandomStrategy)

    def test_built_strategies_share_generator(self) -> None:
        gen = SeededGenerator(1)
        factory = StrategyFactory(SimulationConfig(probabilities=[0.1, 0.9]))
        self.assertIs(factory.build("thompson", gen).generator, gen)

    def test_random_has_no_parameters(self) -> None:
        factory = StrategyFactory(SimulationConfig())
        self.assertEqual(factory.strategy_params("random"), {})


if __name__ == "__main__":
    unittest.main()
