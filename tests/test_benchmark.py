"""Tests for the command-line benchmark."""
from __future__ import annotations

import contextlib
import io
import unittest

from benchmark_strategies import build_config, build_parser, format_leaderboard, main
from arena_core.sim.simulation import run_simulation


class TestBenchmarkCli(unittest.TestCase):
    def test_defaults_build_full_config(self) -> None:
        config = build_config(build_parser().parse_args([]))
        self.assertEqual(config.step_count, 1000)
        self.assertEqual(config.seed, 42)
        self.assertEqual(list(config.probabilities), [0.1, 0.3, 0.5, 0.7, 0.9])
        self.assertEqual(
            list(config.enabled_algorithms), ["random", "ucb", "epsilon_greedy", "thompson"]
        )

    def test_arguments_map_to_config(self) -> None:
        args = build_parser().parse_args(
            ["-n", "50", "--seed", "3", "--probs", "0.2", "0.8", "--algorithms", "ucb1",
             "--ucb-c", "2", "--epsilon-decay", "--min-epsilon", "0.05"]
        )
        config = build_config(args)
        self.assertEqual(config.step_count, 50)
        self.assertEqual(config.seed, 3)
        self.assertEqual(config.enabled_algorithms, ["ucb1"])
        self.assertEqual(config.ucb_exploration_constant, 2.0)
        self.assertTrue(config.epsilon_decay)
        self.assertEqual(config.min_epsilon, 0.05)

    def test_leaderboard_lists_every_algorithm(self) -> None:
        config = build_config(build_parser().parse_args(["-n", "200"]))
        lines = format_leaderboard(run_simulation(config))
        body = "\n".join(lines)
        for label in ("Random", "UCB", "ε-Greedy", "Thompson", "Optimal"):
            self.assertIn(label, body)

    def test_main_prints_table(self) -> None:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(["-n", "100", "--algorithms", "ucb", "thompson"])
        self.assertEqual(code, 0)
        self.assertIn("Final Regret", out.getvalue())

    def test_invalid_configuration_exits(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["--probs", "0.5"])


if __name__ == "__main__":
    unittest.main()
