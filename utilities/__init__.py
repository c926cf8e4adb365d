"""
Utilities Layer
- Provides cross-cutting functionality
- Implements system-wide helpers and tools
- Manages configuration and validation
"""

from .validators.config_validator import AppConfig, MonitoringConfig, ClassificationConfig

__all__ = [
    'AppConfig',
    'MonitoringConfig',
    'ClassificationConfig',
]
