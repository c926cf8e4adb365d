from typing import Optional

from core.entities.classifier_config import RatioHysteresisConfig
from core.entities.pose_entity import Frame, Landmark
from core.service.geometry_service import is_visible, joint_distance
from .hysteresis import HysteresisClassifier

# Normalized coordinates: the frame is one unit wide
FRAME_WIDTH = 1.0


class RatioHysteresisClassifier(HysteresisClassifier):
    """
    Counts repetitions from a joint distance scaled by a reference length,
    so the ratio does not depend on how far the subject stands from the camera.
    """

    def __init__(self, config: RatioHysteresisConfig):
        super().__init__(config, high=config.high_ratio, low=config.low_ratio)

    def measure(self, frame: Frame) -> Optional[float]:
        threshold = self.config.visibility_threshold

        first, second = (frame.get(landmark) for landmark in self.config.distance)
        if not (is_visible(first, threshold) and is_visible(second, threshold)):
            return None

        reference = FRAME_WIDTH
        if self.config.reference is not None:
            ref_a, ref_b = (frame.get(landmark) for landmark in self.config.reference)
            if not (is_visible(ref_a, threshold) and is_visible(ref_b, threshold)):
                return None
            reference = joint_distance(ref_a, ref_b)
            if reference <= 0.0:
                return None

        if self.config.arms_overhead and not all(
            is_visible(frame.get(landmark), threshold)
            for landmark in (Landmark.NOSE, Landmark.LEFT_WRIST, Landmark.RIGHT_WRIST)
        ):
            return None

        return joint_distance(first, second) / reference

    def is_high(self, frame: Frame, value: float) -> bool:
        if not super().is_high(frame, value):
            return False
        return not self.config.arms_overhead or self._wrists_above_nose(frame)

    def is_low(self, frame: Frame, value: float) -> bool:
        if not super().is_low(frame, value):
            return False
        return not self.config.arms_overhead or self._wrists_below_nose(frame)

    @staticmethod
    def _wrists_above_nose(frame: Frame) -> bool:
        nose = frame.get(Landmark.NOSE)
        return all(
            frame.get(wrist).y < nose.y
            for wrist in (Landmark.LEFT_WRIST, Landmark.RIGHT_WRIST)
        )

    @staticmethod
    def _wrists_below_nose(frame: Frame) -> bool:
        nose = frame.get(Landmark.NOSE)
        return all(
            frame.get(wrist).y >= nose.y
            for wrist in (Landmark.LEFT_WRIST, Landmark.RIGHT_WRIST)
        )
