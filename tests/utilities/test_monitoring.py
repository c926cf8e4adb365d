import json
import logging
import os
import sys
import unittest
from unittest.mock import patch

from utilities.monitoring import MonitoringService
from utilities.monitoring.logging import setup_logger
from utilities.monitoring.logging.formatters import JSONFormatter
from utilities.monitoring.metrics import JSONFileExporter, MetricsCollector


class TestMetricsCollector(unittest.TestCase):
    def setUp(self):
        self.collector = MetricsCollector()

    def test_record_and_get(self):
        self.collector.record("session.frames", 3, {"exercise": "pushup"})
        self.collector.record("session.frames", 5)
        samples = self.collector.get_metrics("session.frames")["session.frames"]
        self.assertEqual([s.value for s in samples], [3.0, 5.0])
        self.assertEqual(samples[0].labels, {"exercise": "pushup"})

    def test_summarize(self):
        for value in (2, 4, 9):
            self.collector.record("session.reps", value)
        self.assertEqual(
            self.collector.summarize(),
            {"session.reps": {"count": 3, "sum": 15.0, "min": 2.0, "max": 9.0}},
        )

    def test_clear(self):
        self.collector.record("a", 1)
        self.collector.record("b", 2)
        self.collector.clear_metrics("a")
        self.assertEqual(list(self.collector.get_metrics()), ["b"])
        self.collector.clear_metrics()
        self.assertEqual(self.collector.get_metrics(), {})


def test_json_exporter_writes_file(tmp_path):
    collector = MetricsCollector()
    collector.record("session.frames", 12, {"exercise": "squats"})

    output_file = JSONFileExporter(str(tmp_path / "metrics")).export(collector.get_metrics())

    with open(output_file, encoding="utf-8") as f:
        payload = json.load(f)
    assert payload["metrics"]["session.frames"][0]["value"] == 12.0
    assert payload["metrics"]["session.frames"][0]["labels"] == {"exercise": "squats"}


def test_monitoring_service_exports_and_clears(tmp_path):
    service = MonitoringService(
        "repcount-test",
        log_dir=str(tmp_path / "logs"),
        metrics_dir=str(tmp_path / "metrics"),
    )
    assert service.export_metrics() is None

    service.record_metric("session.reps", 4)
    output_file = service.export_metrics()
    assert os.path.exists(output_file)
    assert service.metrics_collector.get_metrics() == {}


def test_monitoring_service_starts_system_metrics_thread(tmp_path):
    with patch("utilities.monitoring.logger.threading.Thread") as thread:
        MonitoringService("repcount-test", log_dir=str(tmp_path), enable_system_metrics=True)
    thread.return_value.start.assert_called_once()


def test_logger_writes_json_lines(tmp_path):
    log_file = tmp_path / "logs" / "engine.log"
    logger = setup_logger("repcount-test.engine", str(log_file), level=logging.DEBUG)
    logger.info("Selected exercise", extra={"exercise": "pushup"})
    for handler in logger.handlers:
        handler.flush()

    line = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert line["message"] == "Selected exercise"
    assert line["exercise"] == "pushup"
    assert line["level"] == "INFO"


def test_formatter_includes_exception():
    try:
        raise ValueError("bad frame")
    except ValueError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
    data = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad frame" in data["exception"]
