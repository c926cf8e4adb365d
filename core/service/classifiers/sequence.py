from typing import Optional, Tuple

from core.entities.classification import ClassificationUpdate, Phase
from core.entities.classifier_config import SequenceConfig
from core.entities.pose_entity import Frame, Joint, Landmark
from core.interface.classifier_interface import ExerciseClassifierInterface
from core.service.geometry_service import is_visible

BODY_SIDES = (
    (Landmark.LEFT_SHOULDER, Landmark.LEFT_HIP, Landmark.LEFT_ANKLE),
    (Landmark.RIGHT_SHOULDER, Landmark.RIGHT_HIP, Landmark.RIGHT_ANKLE),
)


class SequenceClassifier(ExerciseClassifierInterface):
    """
    Burpees: STAND -> PLANK -> STAND.

    ``step`` is 0 while standing and 1 once the plank position was reached.
    Only getting back up from the plank counts a repetition.
    """

    def __init__(self, config: SequenceConfig):
        self.config = config
        self.step = 0

    def update(self, frame: Frame) -> ClassificationUpdate:
        body = self._body_side(frame)
        if body is None:
            return ClassificationUpdate(cue=self.config.missing_cue)

        shoulder, hip, ankle = body
        horizontal = abs(shoulder.y - ankle.y) < self.config.plank_tolerance
        vertical = shoulder.y < hip.y and abs(shoulder.x - ankle.x) < self.config.stand_tolerance

        if horizontal and self.step == 0:
            self.step = 1
            return ClassificationUpdate(phase=Phase.PLANK, cue=self.config.plank_cue)
        if vertical and self.step == 1:
            self.step = 0
            return ClassificationUpdate(phase=Phase.STAND, cue=self.config.rep_cue, rep_increment=1.0)

        phase = Phase.PLANK if self.step == 1 else Phase.STAND
        return ClassificationUpdate(phase=phase, cue=self.config.between_cue)

    def reset(self) -> None:
        self.step = 0

    def _body_side(self, frame: Frame) -> Optional[Tuple[Joint, Joint, Joint]]:
        for landmarks in BODY_SIDES:
            joints = tuple(frame.get(landmark) for landmark in landmarks)
            if all(is_visible(joint, self.config.visibility_threshold) for joint in joints):
                return joints
        return None
