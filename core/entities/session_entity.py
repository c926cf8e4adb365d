from dataclasses import dataclass, asdict, replace
from datetime import datetime, timezone
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional

from .classification import Phase

IDLE_PHASE = Phase.IDLE.value
READY_CUE = "Get Ready"


@dataclass
class SessionTotals:
    """Running totals of the current session, owned by the classification engine."""
    rep_count: float = 0.0
    phase: str = IDLE_PHASE
    cue: str = READY_CUE

    @property
    def display_count(self) -> int:
        """Whole repetitions, half repetitions are not shown."""
        return int(self.rep_count)

    def copy(self) -> "SessionTotals":
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert session totals to a python dictionary, display count included"""
        return {**asdict(self), "display_count": self.display_count}


class SessionSummary(BaseModel):
    """
    Statistics of a finished session, handed to whatever records it.
    """
    exercise: Optional[str] = Field(default=None, serialization_alias="exercise")
    total_reps: float = Field(default=0.0, serialization_alias="total_reps")
    session_duration_sec: float = Field(default=0.0, serialization_alias="session_duration_sec")
    frames_processed: int = Field(default=0, serialization_alias="frames_processed")
    frames_dropped: int = Field(default=0, serialization_alias="frames_dropped")
    started_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
        serialization_alias="started_at",
    )
    ended_at: Optional[str] = Field(default=None, serialization_alias="ended_at")
