from typing import Callable, Dict, Optional, Type

from core.entities.classifier_config import ClassifierConfig
from core.exceptions import UnknownClassifierPatternError
from core.interface import ExerciseClassifierInterface
from core.service.classifiers import (
    AngleHysteresisClassifier,
    BaselineDriftClassifier,
    KneeLiftClassifier,
    RatioHysteresisClassifier,
    SequenceClassifier,
    ShoulderTapClassifier,
    TimedHoldClassifier,
    TorsoTwistClassifier,
)


class ClassifierFactory:
    """
    Factory for creating classifier instances.
    Maps the ``pattern`` tag of a classifier configuration to its implementation.
    """

    PATTERNS: Dict[str, Type[ExerciseClassifierInterface]] = {
        "angle_hysteresis": AngleHysteresisClassifier,
        "ratio_hysteresis": RatioHysteresisClassifier,
        "baseline_drift": BaselineDriftClassifier,
        "knee_lift": KneeLiftClassifier,
        "shoulder_tap": ShoulderTapClassifier,
        "torso_twist": TorsoTwistClassifier,
        "sequence": SequenceClassifier,
    }

    @staticmethod
    def create(
        config: ClassifierConfig, clock: Optional[Callable[[], float]] = None
    ) -> ExerciseClassifierInterface:
        """
        Create a fresh classifier for a configuration.

        Args:
            config: Tagged classifier configuration
            clock: Optional time source for timed holds

        Returns:
            A new ExerciseClassifierInterface implementation

        Raises:
            UnknownClassifierPatternError: If no classifier implements the pattern
        """
        pattern = getattr(config, "pattern", None)

        if pattern == "timed_hold":
            if clock is None:
                return TimedHoldClassifier(config)
            return TimedHoldClassifier(config, clock=clock)

        classifier_class = ClassifierFactory.PATTERNS.get(pattern)
        if classifier_class is None:
            raise UnknownClassifierPatternError(f"Unsupported classifier pattern: {pattern}")
        return classifier_class(config)
