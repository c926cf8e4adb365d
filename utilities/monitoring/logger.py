import os
import logging
import time
import psutil
import threading
from typing import Optional, Dict

from .logging import setup_logger
from .metrics import MetricsCollector, JSONFileExporter

class MonitoringService:
    def __init__(
        self,
        app_name: str,
        log_dir: str = "logs",
        metrics_dir: str = "metrics",
        log_level: str = "INFO",
        enable_system_metrics: bool = False,
        metrics_interval: int = 60
    ):
        self.app_name = app_name
        self.log_dir = log_dir
        self.metrics_dir = metrics_dir
        self.log_level = logging.getLevelName(log_level.upper())
        self.metrics_interval = metrics_interval
        self.loggers: Dict[str, logging.Logger] = {}
        self.metrics_collector = MetricsCollector()
        self.metrics_exporter = JSONFileExporter(metrics_dir)
        
        if enable_system_metrics:
            self._setup_system_metrics()
    
    def get_logger(self, name: str) -> logging.Logger:
        """Get or create a logger for the specified name"""
        if name not in self.loggers:
            log_file = os.path.join(self.log_dir, f"{name}.log")
            self.loggers[name] = setup_logger(
                f"{self.app_name}.{name}",
                log_file,
                level=self.log_level
            )
        return self.loggers[name]
    
    def record_metric(
        self,
        name: str,
        value: float,
        labels: Optional[Dict[str, str]] = None
    ) -> None:
        """Record a metric value"""
        self.metrics_collector.record(name, value, labels)
    
    def export_metrics(self) -> Optional[str]:
        """Write every recorded metric to the metrics directory and clear them"""
        metrics = self.metrics_collector.get_metrics()
        if not metrics:
            return None
        output_file = self.metrics_exporter.export(metrics)
        self.metrics_collector.clear_metrics()
        return output_file
    
    def _setup_system_metrics(self) -> None:
        """Set up system metrics collection"""
        def collect_metrics():
            while True:
                self.record_metric("system.cpu.usage", psutil.cpu_percent())
                
                memory = psutil.virtual_memory()
                self.record_metric("system.memory.usage", memory.percent)
                self.record_metric(
                    "system.memory.available",
                    memory.available / 1024 / 1024  # MB
                )
                
                time.sleep(self.metrics_interval)
        
        thread = threading.Thread(
            target=collect_metrics,
            daemon=True,
            name="system-metrics"
        )
        thread.start()
