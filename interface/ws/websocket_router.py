import time
import uuid
from datetime import datetime, timezone
from fastapi import APIRouter, WebSocket, WebSocketDisconnect, Query, Depends, status
from pydantic import ValidationError
from typing import Any, Dict, Optional

from core.entities.session_entity import SessionSummary, SessionTotals
from core.usecase import ClassificationEngine
from interface.di import get_classification_engine
from interface.schemas import (
    CompleteMessage,
    FrameMessage,
    ResetMessage,
    SelectExerciseMessage,
    client_message_adapter,
)
from interface.ws.frame_gate import FrameRateGate
from utilities.config import get_classification_settings
from utilities.monitoring import MonitoringFactory

logger = MonitoringFactory.get_logger("interface.ws.router")
websocket_router = APIRouter(prefix="/v1", tags=["v1-websocket"])


def totals_message(totals: SessionTotals, frame: int) -> Dict[str, Any]:
    return {"type": "totals", **totals.to_dict(), "frame": frame}


def error_message(error: ValidationError) -> Dict[str, Any]:
    return {
        "type": "error",
        "detail": [{"loc": list(err["loc"]), "msg": err["msg"]} for err in error.errors()],
    }


class TrackingSession:
    """Frame counters and timing of one WebSocket session."""

    def __init__(self, engine: ClassificationEngine, target_fps: float):
        self.engine = engine
        self.session_id = uuid.uuid4().hex
        self.gate = FrameRateGate(target_fps)
        self.frames_processed = 0
        self.frames_dropped = 0
        self.started_at = datetime.now(timezone.utc)
        self._started = time.monotonic()

    def log_context(self) -> Dict[str, Any]:
        """Fields picked up by the JSON log formatter."""
        return {
            "exercise": self.engine.exercise,
            "session_id": self.session_id,
            "frame": self.frames_processed,
        }

    def summary(self) -> SessionSummary:
        return SessionSummary(
            exercise=self.engine.exercise,
            total_reps=self.engine.totals.rep_count,
            session_duration_sec=round(time.monotonic() - self._started, 3),
            frames_processed=self.frames_processed,
            frames_dropped=self.frames_dropped,
            started_at=self.started_at.isoformat(),
            ended_at=datetime.now(timezone.utc).isoformat(),
        )


async def send_summary(websocket: WebSocket, session: TrackingSession) -> None:
    summary = session.summary()
    await websocket.send_json({"type": "summary", **summary.model_dump(by_alias=True)})
    logger.info(
        f"Session completed: {summary.exercise}, {summary.total_reps} reps, "
        f"{summary.frames_processed} frames in {summary.session_duration_sec}s",
        extra=session.log_context(),
    )


@websocket_router.websocket("/exercise-tracking")
async def exercise_tracking(
    websocket: WebSocket,
    exercise: Optional[str] = Query(None, description="Exercise identifier, defaults to the configured one"),
    engine: ClassificationEngine = Depends(get_classification_engine),
):
    """
    WebSocket endpoint for real-time repetition counting.

    The client sends one JSON message per pose frame and receives the session
    totals after each classified frame. Frames arriving faster than the
    configured cadence are answered with ``{"type": "dropped"}``.
    """
    settings = get_classification_settings()
    await websocket.accept()

    engine.select_exercise(exercise or settings["DEFAULT_EXERCISE"])
    session = TrackingSession(engine, settings["TARGET_FPS"])
    logger.info(f"Session started for {engine.exercise}", extra=session.log_context())
    max_frames = settings["MAX_FRAMES_PER_SESSION"]

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                message = client_message_adapter.validate_json(raw)
            except ValidationError as e:
                logger.warning(f"Invalid message: {e.error_count()} error(s)", extra=session.log_context())
                await websocket.send_json(error_message(e))
                continue

            if isinstance(message, FrameMessage):
                if not session.gate.accept(message.timestamp):
                    session.frames_dropped += 1
                    await websocket.send_json({"type": "dropped"})
                    continue

                totals = engine.process(message.to_frame())
                session.frames_processed += 1
                await websocket.send_json(totals_message(totals, session.frames_processed))

                if session.frames_processed >= max_frames:
                    logger.info(f"Frame limit of {max_frames} reached, closing session", extra=session.log_context())
                    await send_summary(websocket, session)
                    await websocket.close(code=status.WS_1000_NORMAL_CLOSURE)
                    break

            elif isinstance(message, SelectExerciseMessage):
                engine.select_exercise(message.exercise)
                session.gate.reset()
                await websocket.send_json(totals_message(engine.totals, session.frames_processed))

            elif isinstance(message, ResetMessage):
                engine.reset()
                session.gate.reset()
                await websocket.send_json(totals_message(engine.totals, session.frames_processed))

            elif isinstance(message, CompleteMessage):
                await send_summary(websocket, session)
                await websocket.close(code=status.WS_1000_NORMAL_CLOSURE)
                break

    except WebSocketDisconnect:
        logger.info(
            f"Client disconnected after processing {session.frames_processed} frames",
            extra=session.log_context(),
        )
    except Exception as e:
        logger.error(f"Error in websocket handler: {str(e)}", exc_info=True, extra=session.log_context())
        raise
    finally:
        monitoring = MonitoringFactory.get_monitoring_service()
        labels = {"exercise": str(engine.exercise)}
        monitoring.record_metric("session.frames", session.frames_processed, labels)
        monitoring.record_metric("session.frames_dropped", session.frames_dropped, labels)
        monitoring.record_metric("session.reps", engine.totals.rep_count, labels)
