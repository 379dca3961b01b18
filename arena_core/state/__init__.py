"""Per-strategy state records."""
from arena_core.state.arms import BetaPosteriorState, EmpiricalMeanState
from arena_core.state.base import PolicyState

__all__ = ["BetaPosteriorState", "EmpiricalMeanState", "PolicyState"]
