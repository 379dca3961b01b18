"""Ready-made arm probability sets."""
from __future__ import annotations

from typing import List, Optional

import numpy as np

from arena_core.config import DEFAULT_PROBABILITIES
from arena_core.errors import ConfigurationError

MIN_ARMS = 2
MAX_ARMS = 10


def _check_arm_count(n_arms: int) -> None:
    if not MIN_ARMS <= n_arms <= MAX_ARMS:
        raise ConfigurationError(
            f"arm count must be between {MIN_ARMS} and {MAX_ARMS}, got {n_arms}"
        )


def random_probabilities(n_arms: int, seed: Optional[int] = None) -> List[float]:
    """Draw ``n_arms`` probabilities in ``[0.05, 0.95]``, rounded to 2 decimals."""
    _check_arm_count(n_arms)
    rng = np.random.default_rng(seed)
    rates = rng.uniform(0.05, 0.95, size=n_arms)
    return [float(round(rate, 2)) for rate in rates]


def default_probabilities(n_arms: int = len(DEFAULT_PROBABILITIES)) -> List[float]:
    """The default evenly spread arms, truncated or padded with random arms."""
    _check_arm_count(n_arms)
    probs = list(DEFAULT_PROBABILITIES[:n_arms])
    if len(probs) < n_arms:
        probs.extend(random_probabilities(n_arms, seed=n_arms)[len(probs):])
    return probs
