from .geometry_service import is_visible, joint_angle, joint_distance
from .classifiers import (
    AngleHysteresisClassifier,
    RatioHysteresisClassifier,
    BaselineDriftClassifier,
    TimedHoldClassifier,
    KneeLiftClassifier,
    ShoulderTapClassifier,
    TorsoTwistClassifier,
    SequenceClassifier,
)

__all__ = [
    "is_visible",
    "joint_angle",
    "joint_distance",
    "AngleHysteresisClassifier",
    "RatioHysteresisClassifier",
    "BaselineDriftClassifier",
    "TimedHoldClassifier",
    "KneeLiftClassifier",
    "ShoulderTapClassifier",
    "TorsoTwistClassifier",
    "SequenceClassifier",
]
