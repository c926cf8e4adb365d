from typing import Dict, List, Optional
import threading

from core.entities.monitoring import Metric


class MetricsCollector:
    """Thread-safe in-memory store of metric samples, keyed by metric name."""

    def __init__(self):
        self._metrics: Dict[str, List[Metric]] = {}
        self._lock = threading.Lock()

    def record(
        self,
        name: str,
        value: float,
        labels: Optional[Dict[str, str]] = None
    ) -> None:
        """Record a metric value"""
        sample = Metric(name=name, value=float(value), labels=dict(labels or {}))
        with self._lock:
            self._metrics.setdefault(name, []).append(sample)

    def get_metrics(self, name: Optional[str] = None) -> Dict[str, List[Metric]]:
        """Get a snapshot of the recorded samples"""
        with self._lock:
            if name:
                return {name: list(self._metrics.get(name, []))}
            return {key: list(samples) for key, samples in self._metrics.items()}

    def summarize(self) -> Dict[str, Dict[str, float]]:
        """Count, sum, min and max of every metric"""
        summary: Dict[str, Dict[str, float]] = {}
        for name, samples in self.get_metrics().items():
            if not samples:
                continue
            values = [sample.value for sample in samples]
            summary[name] = {
                "count": len(values),
                "sum": sum(values),
                "min": min(values),
                "max": max(values),
            }
        return summary

    def clear_metrics(self, name: Optional[str] = None) -> None:
        """Clear recorded metrics"""
        with self._lock:
            if name:
                self._metrics.pop(name, None)
            else:
                self._metrics.clear()
