from abc import abstractmethod
from typing import FrozenSet, Optional

from core.entities.classification import ClassificationUpdate, Phase, Side
from core.entities.classifier_config import (
    AlternatingLimbSettings,
    KneeLiftConfig,
    ShoulderTapConfig,
    TorsoTwistConfig,
)
from core.entities.pose_entity import Frame, Landmark
from core.interface.classifier_interface import ExerciseClassifierInterface
from core.service.geometry_service import is_visible, joint_distance

SIDE_PHASES = {Side.LEFT: Phase.LEFT, Side.RIGHT: Phase.RIGHT}


class AlternatingLimbClassifier(ExerciseClassifierInterface):
    """
    Counts half repetitions each time activity moves to the other side.

    Repeated activity on the side that was last active never counts, and
    neither does a frame where both sides are active at once.
    """

    def __init__(self, config: AlternatingLimbSettings):
        self.config = config
        self.last_side: Optional[Side] = None

    @abstractmethod
    def active_sides(self, frame: Frame) -> Optional[FrozenSet[Side]]:
        """Return the active sides, or None for insufficient evidence."""
        pass

    def update(self, frame: Frame) -> ClassificationUpdate:
        active = self.active_sides(frame)
        if active is None:
            return ClassificationUpdate(cue=self.config.missing_cue)

        if not active:
            return ClassificationUpdate(phase=self.config.idle_phase, cue=self.config.idle_cue)

        if len(active) == 1:
            (side,) = active
            if side != self.last_side:
                self.last_side = side
                cue = self.config.left_cue if side == Side.LEFT else self.config.right_cue
                return ClassificationUpdate(phase=SIDE_PHASES[side], cue=cue, rep_increment=0.5)

        return ClassificationUpdate(cue=self.config.hold_cue)

    def reset(self) -> None:
        self.last_side = None


class KneeLiftClassifier(AlternatingLimbClassifier):
    """High knees and mountain climbers: a knee raised above its hip."""

    config: KneeLiftConfig

    def active_sides(self, frame: Frame) -> Optional[FrozenSet[Side]]:
        threshold = self.config.visibility_threshold
        measured = False
        active = set()
        for side, knee_landmark, hip_landmark in (
            (Side.LEFT, Landmark.LEFT_KNEE, Landmark.LEFT_HIP),
            (Side.RIGHT, Landmark.RIGHT_KNEE, Landmark.RIGHT_HIP),
        ):
            knee, hip = frame.get(knee_landmark), frame.get(hip_landmark)
            if not (is_visible(knee, threshold) and is_visible(hip, threshold)):
                continue
            measured = True
            if knee.y < hip.y - self.config.lift_threshold:
                active.add(side)
        return frozenset(active) if measured else None


class ShoulderTapClassifier(AlternatingLimbClassifier):
    """Shoulder taps: a wrist close to the opposite shoulder."""

    config: ShoulderTapConfig

    def active_sides(self, frame: Frame) -> Optional[FrozenSet[Side]]:
        threshold = self.config.visibility_threshold
        measured = False
        active = set()
        for side, wrist_landmark, shoulder_landmark in (
            (Side.LEFT, Landmark.LEFT_WRIST, Landmark.RIGHT_SHOULDER),
            (Side.RIGHT, Landmark.RIGHT_WRIST, Landmark.LEFT_SHOULDER),
        ):
            wrist, shoulder = frame.get(wrist_landmark), frame.get(shoulder_landmark)
            if not (is_visible(wrist, threshold) and is_visible(shoulder, threshold)):
                continue
            measured = True
            if joint_distance(wrist, shoulder) < self.config.tap_distance:
                active.add(side)
        return frozenset(active) if measured else None


class TorsoTwistClassifier(AlternatingLimbClassifier):
    """Russian twists: one shoulder swinging horizontally past the other."""

    config: TorsoTwistConfig

    def active_sides(self, frame: Frame) -> Optional[FrozenSet[Side]]:
        threshold = self.config.visibility_threshold
        left, right = frame.get(Landmark.LEFT_SHOULDER), frame.get(Landmark.RIGHT_SHOULDER)
        if not (is_visible(left, threshold) and is_visible(right, threshold)):
            return None

        offset = left.x - right.x
        if offset > self.config.twist_threshold:
            return frozenset({Side.LEFT})
        if offset < -self.config.twist_threshold:
            return frozenset({Side.RIGHT})
        return frozenset()
