from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Phase(str, Enum):
    """Discrete movement states reported by the classifiers."""
    IDLE = "IDLE"
    UP = "UP"
    DOWN = "DOWN"
    HOLD = "HOLD"
    FORM = "FORM"
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    CRUNCH = "CRUNCH"
    OUT = "OUT"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    RUN = "RUN"
    TAP = "TAP"
    TWIST = "TWIST"
    PLANK = "PLANK"
    STAND = "STAND"


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class ClassificationUpdate:
    """
    Result of one classifier update.

    Every field is optional: ``None`` means the classifier has nothing new
    to report for it and the displayed value must be kept.
    ``hold_seconds`` replaces the displayed count instead of adding to it.
    """
    phase: Optional[Phase] = None
    cue: Optional[str] = None
    rep_increment: Optional[float] = None
    hold_seconds: Optional[int] = None
