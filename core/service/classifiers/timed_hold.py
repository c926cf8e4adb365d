import time
from typing import Callable, Optional

from core.entities.classification import ClassificationUpdate, Phase
from core.entities.classifier_config import TimedHoldConfig
from core.entities.pose_entity import Frame
from core.interface.classifier_interface import ExerciseClassifierInterface
from core.service.geometry_service import joint_angle

FRAME_TIME = "frame"
CLOCK_TIME = "clock"


class TimedHoldClassifier(ExerciseClassifierInterface):
    """
    Times a static hold (plank) while the posture angle stays at or above
    ``hold_angle``.

    The elapsed whole seconds are reported as ``hold_seconds``. Breaking form
    clears the hold start and reports zero, so a partial hold is never carried
    over. Time comes from the frame timestamp when the producer sets one,
    otherwise from ``clock``. A hold is timed against the source of its first
    frame; a frame from the other source, or one that goes back in time,
    restarts the hold.
    """

    def __init__(self, config: TimedHoldConfig, clock: Callable[[], float] = time.monotonic):
        self.config = config
        self._clock = clock
        self.hold_started_at: Optional[float] = None
        self.hold_time_source: Optional[str] = None

    def update(self, frame: Frame) -> ClassificationUpdate:
        angles = [
            joint_angle(frame.get(a), frame.get(b), frame.get(c), self.config.visibility_threshold)
            for a, b, c in self.config.joints
        ]
        measured = [angle for angle in angles if angle is not None]
        if not measured:
            return ClassificationUpdate(cue=self.config.missing_cue)

        if max(measured) >= self.config.hold_angle:
            if frame.timestamp is not None:
                now, source = frame.timestamp, FRAME_TIME
            else:
                now, source = self._clock(), CLOCK_TIME
            if (
                self.hold_started_at is None
                or source != self.hold_time_source
                or now < self.hold_started_at
            ):
                self.hold_started_at = now
                self.hold_time_source = source
            seconds = int(now - self.hold_started_at)
            return ClassificationUpdate(phase=Phase.HOLD, cue=self.config.hold_cue, hold_seconds=seconds)

        self.reset()
        return ClassificationUpdate(phase=Phase.FORM, cue=self.config.form_cue, hold_seconds=0)

    def reset(self) -> None:
        self.hold_started_at = None
        self.hold_time_source = None
