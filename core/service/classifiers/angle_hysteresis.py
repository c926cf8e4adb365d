from typing import Optional

from core.entities.classifier_config import AngleHysteresisConfig
from core.entities.pose_entity import Frame
from core.service.geometry_service import joint_angle
from .hysteresis import HysteresisClassifier


class AngleHysteresisClassifier(HysteresisClassifier):
    """
    Counts repetitions from a joint angle (elbow for push-ups, knee for squats).

    With one triplet per body side, the sides that pass the visibility gate
    are combined: ``max`` keeps the more extended side, ``min`` the more
    flexed one. A side that is gated out is simply skipped.
    """

    def __init__(self, config: AngleHysteresisConfig):
        super().__init__(config, high=config.high_angle, low=config.low_angle)

    def measure(self, frame: Frame) -> Optional[float]:
        angles = []
        for end_a, vertex, end_b in self.config.joints:
            angle = joint_angle(
                frame.get(end_a),
                frame.get(vertex),
                frame.get(end_b),
                self.config.visibility_threshold,
            )
            if angle is not None:
                angles.append(angle)

        if not angles:
            return None
        return max(angles) if self.config.combine == "max" else min(angles)
