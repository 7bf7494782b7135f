from .config import GameConfig, default_config
from .simulation import Action, Simulation, step
from .state import GamePhase, SimulationState, TickResult

__all__ = [
    "Action",
    "GameConfig",
    "GamePhase",
    "Simulation",
    "SimulationState",
    "TickResult",
    "default_config",
    "step",
]
