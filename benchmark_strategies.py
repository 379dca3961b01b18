#!/usr/bin/env python3
"""Benchmark the bandit algorithms on the same seeded arms.

Usage:
    python benchmark_strategies.py                 # defaults: 1000 steps, seed=42
    python benchmark_strategies.py -n 5000 --seed 7 --probs 0.1 0.2 0.8
    python benchmark_strategies.py --algorithms ucb thompson --epsilon-decay

Prints a leaderboard with total reward, final regret, exploration rate and
efficiency relative to always pulling the best arm.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from arena_core.config import DEFAULT_ALGORITHMS, DEFAULT_PROBABILITIES, SimulationConfig
from arena_core.errors import BanditError
from arena_core.sim.simulation import SimulationResult, run_simulation


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Translate parsed CLI arguments into a :class:`SimulationConfig`."""
    return SimulationConfig(
        probabilities=args.probs,
        step_count=args.steps,
        enabled_algorithms=args.algorithms,
        ucb_exploration_constant=args.ucb_c,
        epsilon=args.epsilon,
        epsilon_decay=args.epsilon_decay,
        min_epsilon=args.min_epsilon,
        thompson_prior_alpha=args.prior_alpha,
        thompson_prior_beta=args.prior_beta,
        seed=args.seed,
    )


def format_leaderboard(result: SimulationResult) -> List[str]:
    lines = [f"{'Rank':<5} {'Strategy':<12} {'Reward':>8} {'Final Regret':>13} "
             f"{'Explore %':>10} {'Efficiency':>11}"]
    lines.append("-" * 64)
    for rank, (label, reward) in enumerate(result.leaderboard(), start=1):
        data = result.plot_data[label]
        explore = (
            f"{data.exploration_rate[-1] * 100:.1f}"
            if data.exploration_rate is not None
            else "N/A"
        )
        lines.append(
            f"{rank:<5} {label:<12} {reward:>8} {data.cumulative_regret[-1]:>13.2f} "
            f"{explore:>10} {result.efficiency(label):>10.1f}%"
        )
    lines.append("-" * 64)
    best = result.summary["best_rate"]
    lines.append(f"{'Optimal':<18} {result.optimal_reward:>8}  (best arm: {best * 100:.0f}% probability)")
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Benchmark bandit strategies")
    parser.add_argument("-n", "--steps", type=int, default=1_000, help="Steps per algorithm")
    parser.add_argument("--seed", type=int, default=42, help="RNG seed")
    parser.add_argument(
        "--probs",
        type=float,
        nargs="+",
        default=list(DEFAULT_PROBABILITIES),
        help="Success probability of each arm",
    )
    parser.add_argument(
        "--algorithms",
        nargs="+",
        default=list(DEFAULT_ALGORITHMS),
        help="Algorithms to enable (random, ucb, epsilon_greedy, thompson)",
    )
    parser.add_argument("--ucb-c", type=float, default=1.0, help="UCB exploration constant")
    parser.add_argument("--epsilon", type=float, default=0.1, help="Epsilon-greedy rate")
    parser.add_argument("--epsilon-decay", action="store_true", help="Decay epsilon over time")
    parser.add_argument("--min-epsilon", type=float, default=0.0, help="Decay floor")
    parser.add_argument("--prior-alpha", type=float, default=1.0, help="Thompson prior alpha")
    parser.add_argument("--prior-beta", type=float, default=1.0, help="Thompson prior beta")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each algorithm run")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = run_simulation(build_config(args))
    except BanditError as exc:
        parser.error(str(exc))

    if result.exceeds_optimal:
        print("[benchmark] Note: a run beat the optimal expectation through variance.")
    print("\n".join(format_leaderboard(result)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
