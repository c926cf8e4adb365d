from .messages import (
    FrameMessage,
    SelectExerciseMessage,
    ResetMessage,
    CompleteMessage,
    ClientMessage,
    client_message_adapter,
    ExerciseSummary,
    ExerciseDetail,
)

__all__ = [
    "FrameMessage",
    "SelectExerciseMessage",
    "ResetMessage",
    "CompleteMessage",
    "ClientMessage",
    "client_message_adapter",
    "ExerciseSummary",
    "ExerciseDetail",
]
