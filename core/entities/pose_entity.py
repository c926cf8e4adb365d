from enum import IntEnum
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Tuple


class Landmark(IntEnum):
    """MediaPipe Pose landmark indices used by the classifiers."""
    NOSE = 0
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_ELBOW = 13
    RIGHT_ELBOW = 14
    LEFT_WRIST = 15
    RIGHT_WRIST = 16
    LEFT_HIP = 23
    RIGHT_HIP = 24
    LEFT_KNEE = 25
    RIGHT_KNEE = 26
    LEFT_ANKLE = 27
    RIGHT_ANKLE = 28


LANDMARK_COUNT = 33


class Joint(BaseModel):
    """One tracked landmark in normalized frame coordinates (origin top-left)."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    x: float = Field(..., serialization_alias="x")
    y: float = Field(..., serialization_alias="y")
    visibility: float = Field(default=1.0, ge=0.0, le=1.0, serialization_alias="visibility")

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.visibility)


class Frame(BaseModel):
    """
    One snapshot of all tracked joints. A ``None`` slot is an absent joint.
    """
    model_config = ConfigDict(frozen=True)

    joints: Tuple[Optional[Joint], ...] = Field(default_factory=tuple, serialization_alias="joints")
    timestamp: Optional[float] = Field(default=None, serialization_alias="timestamp")

    def get(self, landmark: int) -> Optional[Joint]:
        if 0 <= landmark < len(self.joints):
            return self.joints[landmark]
        return None

    @classmethod
    def from_landmarks(
        cls,
        landmarks: List[Optional[Joint]],
        timestamp: Optional[float] = None,
    ) -> "Frame":
        return cls(joints=tuple(landmarks), timestamp=timestamp)
