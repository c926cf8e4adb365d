"""
Config
- Manages application configuration
- Handles environment-specific settings
- Provides configuration loading and validation
"""

from utilities.validators.config_validator import AppConfig, MonitoringConfig, ClassificationConfig

__all__ = [
    'AppConfig',
    'MonitoringConfig',
    'ClassificationConfig'
]
