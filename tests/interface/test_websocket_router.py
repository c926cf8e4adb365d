import math
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import MagicMock, patch

from core.entities.pose_entity import LANDMARK_COUNT, Landmark
from core.entities.session_entity import SessionTotals
from interface.ws import websocket_router
from interface.ws.websocket_router import totals_message

SETTINGS = {
    "VISIBILITY_THRESHOLD": 0.5,
    "DEFAULT_EXERCISE": "pushup",
    "TARGET_FPS": 30.0,
    "MAX_FRAMES_PER_SESSION": 54000,
}


def elbow_landmarks(angle):
    rad = math.radians(angle)
    landmarks = [None] * LANDMARK_COUNT
    landmarks[Landmark.LEFT_SHOULDER] = {"x": 0.6, "y": 0.5, "visibility": 0.9}
    landmarks[Landmark.LEFT_ELBOW] = {"x": 0.5, "y": 0.5, "visibility": 0.9}
    landmarks[Landmark.LEFT_WRIST] = {
        "x": 0.5 + 0.1 * math.cos(rad),
        "y": 0.5 + 0.1 * math.sin(rad),
        "visibility": 0.9,
    }
    return landmarks


def frame_message(angle, timestamp):
    return {"type": "frame", "landmarks": elbow_landmarks(angle), "timestamp": timestamp}


@pytest.fixture
def settings():
    return dict(SETTINGS)


@pytest.fixture
def client(settings):
    app = FastAPI()
    app.include_router(websocket_router)
    with patch("interface.ws.websocket_router.get_classification_settings", return_value=settings):
        yield TestClient(app)


def test_pushup_session_counts_repetition(client):
    with client.websocket_connect("/v1/exercise-tracking?exercise=pushup") as websocket:
        replies = []
        for index, angle in enumerate((175, 85, 178)):
            websocket.send_json(frame_message(angle, index * 0.1))
            replies.append(websocket.receive_json())

    assert [r["type"] for r in replies] == ["totals"] * 3
    assert (replies[1]["rep_count"], replies[1]["phase"]) == (0.0, "DOWN")
    assert (replies[2]["rep_count"], replies[2]["phase"]) == (1.0, "UP")
    assert replies[2]["display_count"] == 1
    assert replies[2]["frame"] == 3


def test_frames_faster_than_target_are_dropped(client):
    with client.websocket_connect("/v1/exercise-tracking") as websocket:
        websocket.send_json(frame_message(175, 0.0))
        assert websocket.receive_json()["type"] == "totals"
        websocket.send_json(frame_message(85, 0.01))
        assert websocket.receive_json() == {"type": "dropped"}
        websocket.send_json(frame_message(85, 0.05))
        assert websocket.receive_json()["phase"] == "DOWN"


def test_invalid_messages_do_not_end_session(client):
    with client.websocket_connect("/v1/exercise-tracking") as websocket:
        websocket.send_text("not json")
        assert websocket.receive_json()["type"] == "error"

        websocket.send_json({"type": "frame", "landmarks": [{"x": 0.1}]})
        error = websocket.receive_json()
        assert error["type"] == "error"
        assert error["detail"]

        websocket.send_json({"type": "jump"})
        assert websocket.receive_json()["type"] == "error"

        websocket.send_json({"type": "reset"})
        totals = websocket.receive_json()
        assert (totals["type"], totals["phase"], totals["cue"]) == ("totals", "IDLE", "Get Ready")


def test_select_exercise_resets_totals(client):
    with client.websocket_connect("/v1/exercise-tracking?exercise=pushup") as websocket:
        for index, angle in enumerate((175, 85, 178)):
            websocket.send_json(frame_message(angle, index * 0.1))
            websocket.receive_json()

        websocket.send_json({"type": "select_exercise", "exercise": "squats"})
        totals = websocket.receive_json()
        assert totals["rep_count"] == 0.0
        assert totals["phase"] == "IDLE"

        websocket.send_json({"type": "complete"})
        summary = websocket.receive_json()
        assert summary["exercise"] == "squats"


def test_complete_returns_summary(client):
    with client.websocket_connect("/v1/exercise-tracking") as websocket:
        for index, angle in enumerate((175, 85, 178)):
            websocket.send_json(frame_message(angle, index * 0.1))
            websocket.receive_json()
        websocket.send_json(frame_message(178, 0.21))
        websocket.receive_json()

        websocket.send_json({"type": "complete"})
        summary = websocket.receive_json()

    assert summary["type"] == "summary"
    assert summary["exercise"] == "pushup"
    assert summary["total_reps"] == 1.0
    assert summary["frames_processed"] == 3
    assert summary["frames_dropped"] == 1
    assert summary["started_at"] <= summary["ended_at"]


def test_frame_limit_closes_session(client, settings):
    settings["MAX_FRAMES_PER_SESSION"] = 2
    settings["TARGET_FPS"] = 0
    with client.websocket_connect("/v1/exercise-tracking") as websocket:
        websocket.send_json(frame_message(175, None))
        websocket.receive_json()
        websocket.send_json(frame_message(85, None))
        assert websocket.receive_json()["type"] == "totals"
        summary = websocket.receive_json()

    assert summary["type"] == "summary"
    assert summary["frames_processed"] == 2


def test_session_metrics_are_recorded(client):
    monitoring = MagicMock()
    with patch(
        "interface.ws.websocket_router.MonitoringFactory.get_monitoring_service",
        return_value=monitoring,
    ):
        with client.websocket_connect("/v1/exercise-tracking") as websocket:
            websocket.send_json(frame_message(175, 0.0))
            websocket.receive_json()
            websocket.send_json({"type": "complete"})
            websocket.receive_json()

    recorded = {call.args[0]: call.args[1] for call in monitoring.record_metric.call_args_list}
    assert recorded["session.frames"] == 1
    assert recorded["session.frames_dropped"] == 0
    assert recorded["session.reps"] == 0.0


def test_totals_message_carries_session_totals():
    totals = SessionTotals(rep_count=2.5, phase="UP", cue="Push up!")
    message = totals_message(totals, 7)
    assert message == {"type": "totals", **totals.to_dict(), "frame": 7}
    assert message["display_count"] == 2


def test_session_logs_carry_context(client):
    with patch("interface.ws.websocket_router.logger") as logger:
        with client.websocket_connect("/v1/exercise-tracking?exercise=pushup") as websocket:
            websocket.send_json(frame_message(175, 0.0))
            websocket.receive_json()
            websocket.send_text("not json")
            websocket.receive_json()
            websocket.send_json({"type": "complete"})
            websocket.receive_json()

    warning = logger.warning.call_args.kwargs["extra"]
    assert (warning["exercise"], warning["frame"]) == ("pushup", 1)
    completed = logger.info.call_args.kwargs["extra"]
    assert completed["session_id"] == warning["session_id"]
    assert len(completed["session_id"]) == 32
