from abc import abstractmethod
from typing import Optional

from core.entities.classification import ClassificationUpdate, Phase
from core.entities.classifier_config import HysteresisSettings
from core.entities.pose_entity import Frame
from core.interface.classifier_interface import ExerciseClassifierInterface
from utilities.monitoring import MonitoringFactory

logger = MonitoringFactory.get_logger("service.classifiers")


class HysteresisClassifier(ExerciseClassifierInterface):
    """
    Two-threshold phase latch shared by the angle, ratio and drift classifiers.

    A measurement at or above ``high`` latches the high phase, at or below
    ``low`` the low phase; anything in between keeps the latched phase.
    One repetition is counted when the counted phase is entered from the
    opposite one. The counted phase is also the initial phase, so the first
    frame of a session never counts.
    """

    def __init__(self, config: HysteresisSettings, high: float, low: float):
        self.config = config
        self.high = high
        self.low = low
        self._count_phase: Phase = (
            config.high_phase if config.count_on == "high" else config.low_phase
        )
        self.phase: Phase = self._count_phase

    @abstractmethod
    def measure(self, frame: Frame) -> Optional[float]:
        """Return the tracked quantity, or None for insufficient evidence."""
        pass

    def is_high(self, frame: Frame, value: float) -> bool:
        return value >= self.high

    def is_low(self, frame: Frame, value: float) -> bool:
        return value <= self.low

    def update(self, frame: Frame) -> ClassificationUpdate:
        value = self.measure(frame)
        if value is None:
            return ClassificationUpdate(cue=self.config.missing_cue)

        if self.is_high(frame, value):
            return self._latch(self.config.high_phase, self.config.high_cue)
        if self.is_low(frame, value):
            return self._latch(self.config.low_phase, self.config.low_cue)
        return ClassificationUpdate(phase=self.phase, cue=self.config.between_cue)

    def reset(self) -> None:
        self.phase = self._count_phase

    def _latch(self, phase: Phase, cue: str) -> ClassificationUpdate:
        previous, self.phase = self.phase, phase
        if phase == self._count_phase and previous != phase:
            logger.debug(f"{type(self).__name__}: repetition on {previous.value} -> {phase.value}")
            return ClassificationUpdate(phase=phase, cue=self.config.rep_cue, rep_increment=1.0)
        return ClassificationUpdate(phase=phase, cue=cue)
