from .classifier_interface import ExerciseClassifierInterface
from .metrics_exporter_interface import MetricsExporter

__all__ = [
    "ExerciseClassifierInterface",
    "MetricsExporter",
]
