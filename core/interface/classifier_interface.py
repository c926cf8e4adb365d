from abc import ABC, abstractmethod

from core.entities.classification import ClassificationUpdate
from core.entities.pose_entity import Frame


class ExerciseClassifierInterface(ABC):
    @abstractmethod
    def update(self, frame: Frame) -> ClassificationUpdate:
        """
        Classify one frame of joints.

        Args:
            frame: Joints of the current frame

        Returns:
            ClassificationUpdate with the fields the classifier has something new for.
            Absent or low-confidence joints yield a cue-only update.
        """
        pass

    @abstractmethod
    def reset(self) -> None:
        """
        Restore the initial phase and clear every auxiliary field.
        """
        pass
