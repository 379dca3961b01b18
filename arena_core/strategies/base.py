"""Abstract base class shared by every bandit algorithm."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from arena_core.rng import SeededGenerator
from arena_core.state.base import PolicyState


class BaseBanditStrategy(ABC):
    """Common interface for all Multi-Armed Bandit strategies.

    Every strategy receives the :class:`SeededGenerator` of the run it takes
    part in and owns a private :class:`PolicyState`.  Strategies never touch
    the reward environment: the runner passes the observed reward back
    through :meth:`update`.
    """

    name: str = "base"  # machine name, overridden by subclasses
    label: str = "Base"  # display label used as the result key
    color: str = "#888888"

    def __init__(self, n_arms: int, generator: SeededGenerator, **kwargs: Any) -> None:
        self.n_arms = n_arms
        self.generator = generator
        self.state = self.initial_state()

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.params().items())
        return f"{type(self).__name__}(n_arms={self.n_arms}{', ' if params else ''}{params})"

    # ---- abstract API -------------------------------------------------------

    @abstractmethod
    def initial_state(self) -> PolicyState:
        """Return a fresh state record for this strategy."""

    @abstractmethod
    def select_arm(self) -> int:
        """Choose the arm to pull next.

        Implementations append exactly one flag to the exploration history
        per call.

        Returns
        -------
        int
            Index of the chosen arm in ``[0, n_arms)``.
        """

    @abstractmethod
    def update(self, arm: int, reward: float) -> None:
        """Record the reward observed for ``arm``.

        Parameters
        ----------
        arm:
            The arm returned by the preceding :meth:`select_arm` call.
        reward:
            Observed reward (0 or 1 for Bernoulli arms).
        """

    # ---- convenience --------------------------------------------------------

    def params(self) -> dict[str, Any]:
        """Algorithm parameters echoed by :meth:`stats`."""
        return {}

    def reset(self) -> None:
        """Forget everything learned; parameters are kept."""
        self.state.clear()

    @property
    def exploration_history(self) -> list[bool]:
        return self.state.exploration_history

    def stats(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "label": self.label,
            **self.params(),
            "total_exploration": self.state.exploration_count,
            "total_exploitation": self.state.exploitation_count,
        }
