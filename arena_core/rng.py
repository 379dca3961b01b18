"""Deterministic pseudorandom generator used by every simulation run."""
from __future__ import annotations

import math
from typing import Iterator

from arena_core.errors import InvalidParameter

_MODULUS = 2**32
_MASK = 0xFFFFFFFF
_MULTIPLIER = 1664525
_INCREMENT = 1013904223

DEFAULT_SEED = 42


class SeededGenerator:
    """32-bit linear-congruential generator with derived samplers.

    The whole draw stream is a pure function of the seed, so two generators
    seeded alike (or one generator reset between uses) reproduce the same
    uniforms, normals, gammas and betas bit for bit.

    Parameters
    ----------
    seed : int
        Any integer; it is masked to an unsigned 32-bit value.
    """

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.initial_seed = 0
        self.state = 0
        self.seed(seed)

    def __repr__(self) -> str:
        return f"SeededGenerator(seed={self.initial_seed}, state={self.state})"

    # ---- state --------------------------------------------------------------

    def seed(self, value: int) -> None:
        """Replace the seed and restart the stream from it."""
        self.initial_seed = int(value) & _MASK
        self.state = self.initial_seed

    def reset(self) -> None:
        """Restart the stream from the current seed."""
        self.state = self.initial_seed

    # ---- uniform ------------------------------------------------------------

    def next_uniform(self) -> float:
        """Advance the recurrence once and return a float in ``[0, 1)``."""
        self.state = (_MULTIPLIER * self.state + _INCREMENT) % _MODULUS
        return self.state / _MODULUS

    def uniforms(self) -> Iterator[float]:
        """Lazily yield uniforms forever; each item advances the shared state."""
        while True:
            yield self.next_uniform()

    def next_int(self, bound: int) -> int:
        """Return an integer in ``[0, bound)``."""
        if bound <= 0:
            raise InvalidParameter(f"bound must be > 0, got {bound}")
        return math.floor(self.next_uniform() * bound)

    # ---- derived distributions ---------------------------------------------

    def next_normal(self) -> float:
        """Standard normal draw via the Box-Muller transform.

        A first uniform of exactly ``0.0`` is not resampled; ``math.log``
        raises ``ValueError`` in that case.
        """
        u1 = self.next_uniform()
        u2 = self.next_uniform()
        return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)

    def gamma_sample(self, alpha: float) -> float:
        """Draw from ``Gamma(alpha, 1)`` (Marsaglia & Tsang, 2000).

        Shapes below one are boosted: draw ``u`` first, then a
        ``Gamma(alpha + 1)`` sample scaled by ``u ** (1 / alpha)``.
        """
        if alpha <= 0:
            raise InvalidParameter(f"alpha must be > 0 for Gamma distribution, got {alpha}")

        if alpha < 1:
            u = self.next_uniform()
            return self._marsaglia_tsang(alpha + 1.0) * u ** (1.0 / alpha)
        return self._marsaglia_tsang(alpha)

    def beta_sample(self, a: float, b: float) -> float:
        """Draw from ``Beta(a, b)`` as ``X / (X + Y)`` of two gamma draws."""
        x = self.gamma_sample(a)
        y = self.gamma_sample(b)
        return x / (x + y)

    def _marsaglia_tsang(self, alpha: float) -> float:
        d = alpha - 1.0 / 3.0
        c = 1.0 / math.sqrt(9.0 * d)

        while True:
            x = self.next_normal()
            v = 1.0 + c * x
            while v <= 0:
                x = self.next_normal()
                v = 1.0 + c * x

            v = v * v * v
            u = self.next_uniform()

            if u < 1.0 - 0.0331 * x**4:
                return d * v
            if math.log(u) < 0.5 * x * x + d * (1.0 - v + math.log(v)):
                return d * v
