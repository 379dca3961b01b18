"""Bookkeeping shared by every strategy's private state."""
from __future__ import annotations

from arena_core.errors import ConfigurationError, InvalidParameter


class PolicyState:
    """Exploration history for one strategy during one run.

    The history is append-only: one flag per executed step, ``True`` when the
    step was an exploration move.  Subclasses add the per-arm statistics a
    strategy needs and must restore them in :meth:`clear`.
    """

    def __init__(self, n_arms: int) -> None:
        if n_arms < 2:
            raise ConfigurationError(f"at least two arms are required, got {n_arms}")
        self.n_arms = n_arms
        self.exploration_history: list[bool] = []

    # ---- history ------------------------------------------------------------

    def record(self, explored: bool) -> None:
        self.exploration_history.append(bool(explored))

    @property
    def steps(self) -> int:
        return len(self.exploration_history)

    @property
    def exploration_count(self) -> int:
        return sum(1 for flag in self.exploration_history if flag)

    @property
    def exploitation_count(self) -> int:
        return self.steps - self.exploration_count

    # ---- lifecycle ----------------------------------------------------------

    def clear(self) -> None:
        self.exploration_history = []

    def check_arm(self, arm: int) -> None:
        if not 0 <= arm < self.n_arms:
            raise InvalidParameter(f"arm index {arm} out of range for {self.n_arms} arms")
