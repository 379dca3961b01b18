"""Tests for the seeded generator and its derived samplers."""
from __future__ import annotations

import itertools
import math
import unittest

from arena_core.errors import InvalidParameter
from arena_core.rng import SeededGenerator


class TestUniform(unittest.TestCase):
    def test_first_draw_follows_recurrence(self) -> None:
        gen = SeededGenerator(0)
        self.assertEqual(gen.next_uniform(), 1013904223 / 2**32)
        self.assertEqual(gen.state, 1013904223)

    def test_second_draw_follows_recurrence(self) -> None:
        gen = SeededGenerator(7)
        first = (1664525 * 7 + 1013904223) % 2**32
        second = (1664525 * first + 1013904223) % 2**32
        gen.next_uniform()
        self.assertEqual(gen.next_uniform(), second / 2**32)

    def test_seed_is_masked_to_32_bits(self) -> None:
        self.assertEqual(SeededGenerator(-1).initial_seed, 0xFFFFFFFF)
        self.assertEqual(SeededGenerator(2**32 + 5).initial_seed, 5)

    def test_reset_replays_identical_stream(self) -> None:
        for seed in (0, 1, 42, 123456789, 0xFFFFFFFF):
            gen = SeededGenerator(seed)
            first = [gen.next_uniform() for _ in range(500)]
            gen.reset()
            second = [gen.next_uniform() for _ in range(500)]
            self.assertEqual(first, second)

    def test_seed_restarts_stream(self) -> None:
        gen = SeededGenerator(5)
        expected = [gen.next_uniform() for _ in range(10)]
        gen.next_uniform()
        gen.seed(5)
        self.assertEqual([gen.next_uniform() for _ in range(10)], expected)

    def test_range_and_mean(self) -> None:
        gen = SeededGenerator(42)
        draws = [gen.next_uniform() for _ in range(100_000)]
        self.assertTrue(all(0.0 <= u < 1.0 for u in draws))
        self.assertAlmostEqual(sum(draws) / len(draws), 0.5, delta=0.01)

    def test_uniforms_iterator_shares_state(self) -> None:
        gen = SeededGenerator(3)
        lazy = list(itertools.islice(gen.uniforms(), 5))
        gen.reset()
        self.assertEqual(lazy, [gen.next_uniform() for _ in range(5)])


class TestNextInt(unittest.TestCase):
    def test_values_within_bound(self) -> None:
        gen = SeededGenerator(11)
        values = {gen.next_int(4) for _ in range(1000)}
        self.assertEqual(values, {0, 1, 2, 3})

    def test_non_positive_bound_rejected(self) -> None:
        gen = SeededGenerator(11)
        with self.assertRaises(InvalidParameter):
            gen.next_int(0)
        with self.assertRaises(InvalidParameter):
            gen.next_int(-3)


class TestDerivedDistributions(unittest.TestCase):
    def test_normal_moments(self) -> None:
        gen = SeededGenerator(42)
        draws = [gen.next_normal() for _ in range(20_000)]
        mean = sum(draws) / len(draws)
        var = sum((x - mean) ** 2 for x in draws) / len(draws)
        self.assertAlmostEqual(mean, 0.0, delta=0.05)
        self.assertAlmostEqual(var, 1.0, delta=0.1)

    def test_normal_consumes_two_uniforms(self) -> None:
        gen = SeededGenerator(9)
        u1, u2 = gen.next_uniform(), gen.next_uniform()
        expected = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
        gen.reset()
        self.assertEqual(gen.next_normal(), expected)

    def test_gamma_mean_large_shape(self) -> None:
        gen = SeededGenerator(42)
        draws = [gen.gamma_sample(3.0) for _ in range(20_000)]
        self.assertTrue(all(x > 0 for x in draws))
        self.assertAlmostEqual(sum(draws) / len(draws), 3.0, delta=0.1)

    def test_gamma_mean_small_shape(self) -> None:
        gen = SeededGenerator(42)
        draws = [gen.gamma_sample(0.5) for _ in range(20_000)]
        self.assertTrue(all(x >= 0 for x in draws))
        self.assertAlmostEqual(sum(draws) / len(draws), 0.5, delta=0.05)

    def test_gamma_rejects_non_positive_shape(self) -> None:
        gen = SeededGenerator(42)
        for alpha in (0.0, -1.0):
            with self.assertRaises(InvalidParameter):
                gen.gamma_sample(alpha)

    def test_beta_2_2_mean(self) -> None:
        gen = SeededGenerator(42)
        draws = [gen.beta_sample(2.0, 2.0) for _ in range(100_000)]
        self.assertTrue(all(0.0 <= x <= 1.0 for x in draws))
        self.assertAlmostEqual(sum(draws) / len(draws), 0.5, delta=0.02)

    def test_beta_skewed_mean(self) -> None:
        gen = SeededGenerator(1)
        draws = [gen.beta_sample(8.0, 2.0) for _ in range(20_000)]
        self.assertAlmostEqual(sum(draws) / len(draws), 0.8, delta=0.02)

    def test_beta_propagates_invalid_shape(self) -> None:
        gen = SeededGenerator(1)
        with self.assertRaises(InvalidParameter):
            gen.beta_sample(1.0, 0.0)
        with self.assertRaises(InvalidParameter):
            gen.beta_sample(-2.0, 1.0)

    def test_samplers_are_reproducible(self) -> None:
        gen = SeededGenerator(2024)
        first = [gen.beta_sample(0.7, 1.3) for _ in range(200)]
        gen.reset()
        second = [gen.beta_sample(0.7, 1.3) for _ in range(200)]
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
