import dotenv
from functools import lru_cache
from pathlib import Path
from typing import Dict, Any

from .validators.config_validator import AppConfig
from .monitoring.factory import MonitoringFactory

logger = MonitoringFactory.get_logger("config")

@lru_cache()
def get_config() -> AppConfig:
    """Get application configuration with environment variable overrides"""
    try:
        # Log configuration source
        env_file = Path(".env")
        if dotenv.find_dotenv(filename=env_file) != "":
            dotenv.load_dotenv(dotenv_path=env_file)
            logger.info("Configuration loaded from .env file")
        else:
            logger.info("Configuration loaded from environment variables")

        config = AppConfig()

        # Log important settings
        logger.info(f"Environment: {config.ENV}")
        logger.info(f"Debug mode: {config.DEBUG}")
        logger.info(f"Visibility threshold: {config.CLASSIFICATION.VISIBILITY_THRESHOLD}")

        return config

    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        raise

def get_classification_settings() -> Dict[str, Any]:
    """Get classification-specific settings"""
    config = get_config()
    return config.CLASSIFICATION.model_dump()
