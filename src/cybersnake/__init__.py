from .engine import GameEngine
from .state import Phase, Snapshot
from .timer import TickTimer

__all__ = ["GameEngine", "Phase", "Snapshot", "TickTimer"]
