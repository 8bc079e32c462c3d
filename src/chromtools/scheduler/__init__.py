from .signal import ChangeSignal
from .recompute import CycleState, Progress, RecomputeScheduler

__all__ = [
    "ChangeSignal",
    "CycleState",
    "Progress",
    "RecomputeScheduler",
]
