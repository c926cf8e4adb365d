from typing import Optional

from core.entities.classifier_config import BaselineDriftConfig
from core.entities.pose_entity import Frame, Landmark
from core.service.geometry_service import is_visible
from .hysteresis import HysteresisClassifier


class BaselineDriftClassifier(HysteresisClassifier):
    """
    Counts repetitions from how far a joint rises above where it was first seen
    (calf raises track the ankle).

    The first candidate joint seen visible is locked in together with its
    position. Frames where that joint is hidden carry no evidence, even when
    another candidate is visible.
    """

    def __init__(self, config: BaselineDriftConfig):
        super().__init__(config, high=config.rise_threshold, low=config.return_threshold)
        self.tracked: Optional[Landmark] = None
        self.baseline: Optional[float] = None

    def measure(self, frame: Frame) -> Optional[float]:
        if self.tracked is None:
            for landmark in self.config.joints:
                joint = frame.get(landmark)
                if is_visible(joint, self.config.visibility_threshold):
                    self.tracked, self.baseline = landmark, joint.y
                    break
            else:
                return None

        joint = frame.get(self.tracked)
        if not is_visible(joint, self.config.visibility_threshold):
            return None
        # y grows downwards
        return self.baseline - joint.y

    def reset(self) -> None:
        super().reset()
        self.tracked = None
        self.baseline = None
