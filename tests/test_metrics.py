"""Tests for the metrics computed from completed runs."""
from __future__ import annotations

import unittest

from arena_core.errors import InvalidParameter
from arena_core.rng import SeededGenerator
from arena_core.sim.metrics import (
    arm_pull_histogram,
    build_plot_data,
    cumulative_regret,
    cumulative_reward,
    exploration_rate,
    total_reward,
)
from arena_core.sim.runner import RunResult
from arena_core.strategies.ucb import UCBStrategy


class TestMetrics(unittest.TestCase):
    def test_cumulative_reward(self) -> None:
        self.assertEqual(cumulative_reward([1, 0, 1, 1]), [1, 1, 2, 3])

    def test_cumulative_regret_keeps_negative_values(self) -> None:
        regret = cumulative_regret([1, 1, 2, 3], 0.5)
        for got, expected in zip(regret, [-0.5, 0.0, -0.5, -1.0]):
            self.assertAlmostEqual(got, expected)

    def test_exploration_rate(self) -> None:
        rate = exploration_rate([True, False, True, False])
        for got, expected in zip(rate, [1.0, 0.5, 2 / 3, 0.5]):
            self.assertAlmostEqual(got, expected)
        self.assertTrue(all(0.0 <= r <= 1.0 for r in rate))

    def test_arm_pull_histogram(self) -> None:
        self.assertEqual(arm_pull_histogram([0, 2, 2, 1], 3), [1, 1, 2])
        self.assertEqual(arm_pull_histogram([1, 1], 4), [0, 2, 0, 0])

    def test_histogram_rejects_unknown_arm(self) -> None:
        with self.assertRaises(InvalidParameter):
            arm_pull_histogram([0, 3], 3)
        with self.assertRaises(InvalidParameter):
            arm_pull_histogram([-1], 3)

    def test_total_reward(self) -> None:
        self.assertEqual(total_reward([1, 0, 1, 1]), 3)
        self.assertEqual(total_reward([]), 0)

    def test_build_plot_data(self) -> None:
        strategy = UCBStrategy(2, SeededGenerator(1))
        for arm in (0, 1, 0):
            strategy.state.record(arm == 1)
        run = RunResult(rewards=[1, 0, 1], chosen_arms=[0, 1, 0])

        data = build_plot_data(strategy, run, best_rate=0.8)

        self.assertEqual(data.label, "UCB")
        self.assertEqual(data.color, "#00f5d4")
        self.assertEqual(data.timesteps, [1, 2, 3])
        self.assertEqual(data.cumulative_reward, [1, 1, 2])
        self.assertAlmostEqual(data.cumulative_regret[-1], 3 * 0.8 - 2)
        self.assertEqual(data.arm_pull_histogram, [2, 1])
        self.assertEqual(data.total_reward, 2)
        self.assertEqual(len(data.exploration_rate), 3)
        self.assertEqual(data.stats["total_exploration"], 1)
        self.assertIn("cumulative_regret", data.to_dict())


if __name__ == "__main__":
    unittest.main()
