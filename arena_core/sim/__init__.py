"""Environment, runner, metrics and request orchestration."""
from arena_core.sim.environment import BernoulliBanditEnv
from arena_core.sim.metrics import PlotData, build_plot_data
from arena_core.sim.runner import RunResult, drive
from arena_core.sim.simulation import SimulationResult, run_simulation

__all__ = [
    "BernoulliBanditEnv",
    "PlotData",
    "RunResult",
    "SimulationResult",
    "build_plot_data",
    "drive",
    "run_simulation",
]
