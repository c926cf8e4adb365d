"""
Monitoring
- Configures per-module loggers (JSON file output and console output)
- Collects and exports in-memory metrics
"""

from .factory import MonitoringFactory
from .logger import MonitoringService

__all__ = ["MonitoringFactory", "MonitoringService"]
