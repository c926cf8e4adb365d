from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from typing import List, Literal, Optional, Union
from typing_extensions import Annotated

from core.entities.pose_entity import Frame, Joint, LANDMARK_COUNT


class FrameMessage(BaseModel):
    """Landmarks of one frame, indexed by MediaPipe Pose landmark id."""
    model_config = ConfigDict(extra="ignore")

    type: Literal["frame"] = "frame"
    landmarks: List[Optional[Joint]] = Field(..., max_length=LANDMARK_COUNT)
    timestamp: Optional[float] = Field(default=None, description="Capture time in seconds")

    def to_frame(self) -> Frame:
        return Frame.from_landmarks(self.landmarks, timestamp=self.timestamp)


class SelectExerciseMessage(BaseModel):
    type: Literal["select_exercise"] = "select_exercise"
    exercise: str = Field(..., min_length=1)


class ResetMessage(BaseModel):
    type: Literal["reset"] = "reset"


class CompleteMessage(BaseModel):
    type: Literal["complete"] = "complete"


ClientMessage = Annotated[
    Union[FrameMessage, SelectExerciseMessage, ResetMessage, CompleteMessage],
    Field(discriminator="type"),
]

client_message_adapter = TypeAdapter(ClientMessage)


class ExerciseSummary(BaseModel):
    """Catalog listing entry."""
    id: str
    pattern: str


class ExerciseDetail(ExerciseSummary):
    """Catalog entry with its full classifier configuration."""
    config: dict
