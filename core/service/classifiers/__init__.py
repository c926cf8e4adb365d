from .hysteresis import HysteresisClassifier
from .angle_hysteresis import AngleHysteresisClassifier
from .ratio_hysteresis import RatioHysteresisClassifier
from .baseline_drift import BaselineDriftClassifier
from .timed_hold import TimedHoldClassifier
from .alternating_limb import (
    AlternatingLimbClassifier,
    KneeLiftClassifier,
    ShoulderTapClassifier,
    TorsoTwistClassifier,
)
from .sequence import SequenceClassifier

__all__ = [
    "HysteresisClassifier",
    "AngleHysteresisClassifier",
    "RatioHysteresisClassifier",
    "BaselineDriftClassifier",
    "TimedHoldClassifier",
    "AlternatingLimbClassifier",
    "KneeLiftClassifier",
    "ShoulderTapClassifier",
    "TorsoTwistClassifier",
    "SequenceClassifier",
]
