from .pose_entity import Landmark, Joint, Frame, LANDMARK_COUNT
from .classification import Phase, Side, ClassificationUpdate
from .session_entity import SessionTotals, SessionSummary, IDLE_PHASE, READY_CUE
from .classifier_config import (
    ClassifierConfig,
    ClassifierSettings,
    HysteresisSettings,
    AngleHysteresisConfig,
    RatioHysteresisConfig,
    BaselineDriftConfig,
    TimedHoldConfig,
    AlternatingLimbSettings,
    KneeLiftConfig,
    ShoulderTapConfig,
    TorsoTwistConfig,
    SequenceConfig,
)
from .monitoring import Metric

__all__ = [
    "Landmark",
    "Joint",
    "Frame",
    "LANDMARK_COUNT",
    "Phase",
    "Side",
    "ClassificationUpdate",
    "SessionTotals",
    "SessionSummary",
    "IDLE_PHASE",
    "READY_CUE",
    "ClassifierConfig",
    "ClassifierSettings",
    "HysteresisSettings",
    "AngleHysteresisConfig",
    "RatioHysteresisConfig",
    "BaselineDriftConfig",
    "TimedHoldConfig",
    "AlternatingLimbSettings",
    "KneeLiftConfig",
    "ShoulderTapConfig",
    "TorsoTwistConfig",
    "SequenceConfig",
    "Metric",
]
