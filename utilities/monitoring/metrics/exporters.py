from typing import Dict, List
import json
import os
from datetime import datetime, timezone

from core.entities.monitoring import Metric
from core.interface.metrics_exporter_interface import MetricsExporter


class JSONFileExporter(MetricsExporter):
    """Writes each export to its own ``metrics_<utc timestamp>.json`` file."""

    def __init__(self, output_dir: str):
        self.output_dir = output_dir

    def export(self, metrics: Dict[str, List[Metric]]) -> str:
        os.makedirs(self.output_dir, exist_ok=True)
        exported_at = datetime.now(timezone.utc)
        output_file = os.path.join(
            self.output_dir, f"metrics_{exported_at.strftime('%Y%m%d_%H%M%S_%f')}.json"
        )

        payload = {
            "exported_at": exported_at.isoformat(),
            "metrics": {
                name: [
                    {
                        "value": sample.value,
                        "timestamp": sample.timestamp.isoformat(),
                        "labels": sample.labels,
                    }
                    for sample in samples
                ]
                for name, samples in metrics.items()
            },
        }

        with open(output_file, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        return output_file
