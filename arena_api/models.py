"""Pydantic models for request/response payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from arena_core.config import DEFAULT_ALGORITHMS, DEFAULT_PROBABILITIES, SimulationConfig


class SimulationRequest(BaseModel):
    probabilities: list[float] = Field(
        default_factory=lambda: list(DEFAULT_PROBABILITIES),
        description="True success probability of each arm, in arm order.",
    )
    step_count: int = Field(default=1000, description="Steps per algorithm run.")
    enabled_algorithms: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALGORITHMS),
        description="e.g. random, ucb, epsilon_greedy, thompson",
    )
    ucb_exploration_constant: float = Field(default=1.0, ge=0.0)
    epsilon: float = Field(default=0.1, ge=0.0, le=1.0)
    epsilon_decay: bool = False
    min_epsilon: float = Field(default=0.0, ge=0.0, le=1.0)
    thompson_prior_alpha: float = Field(default=1.0, gt=0.0)
    thompson_prior_beta: float = Field(default=1.0, gt=0.0)
    seed: int | None = Field(default=None, ge=0, le=0xFFFFFFFF)

    @field_validator("enabled_algorithms")
    @classmethod
    def strip_names(cls, value: list[str]) -> list[str]:
        # Empty selections are rejected by the core with a 400.
        return [name.strip() for name in value if name.strip()]

    def to_config(self, default_seed: int) -> SimulationConfig:
        return SimulationConfig(
            probabilities=self.probabilities,
            step_count=self.step_count,
            enabled_algorithms=self.enabled_algorithms,
            ucb_exploration_constant=self.ucb_exploration_constant,
            epsilon=self.epsilon,
            epsilon_decay=self.epsilon_decay,
            min_epsilon=self.min_epsilon,
            thompson_prior_alpha=self.thompson_prior_alpha,
            thompson_prior_beta=self.thompson_prior_beta,
            seed=default_seed if self.seed is None else self.seed,
        )


class PlotDataResponse(BaseModel):
    label: str
    color: str
    timesteps: list[int]
    cumulative_reward: list[float]
    cumulative_regret: list[float]
    exploration_rate: list[float] | None = None
    arm_pull_histogram: list[int]
    total_reward: float
    stats: dict[str, Any] = Field(default_factory=dict)


class SummaryResponse(BaseModel):
    probabilities: list[float]
    best_rate: float
    n_arms: int
    step_count: int


class LeaderboardEntry(BaseModel):
    label: str
    total_reward: float
    efficiency: float


class SimulationResponse(BaseModel):
    seed: int
    plot_data: dict[str, PlotDataResponse]
    summary: SummaryResponse
    optimal_reward: int
    leaderboard: list[LeaderboardEntry]
    winner: str
    exceeds_optimal: bool


class AlgorithmInfo(BaseModel):
    name: str
    label: str
    color: str
    default_params: dict[str, Any] = Field(default_factory=dict)


class ProbabilitiesResponse(BaseModel):
    n_arms: int
    probabilities: list[float]
