from functools import lru_cache
from typing import Dict

from fastapi.requests import HTTPConnection

from core.entities.classifier_config import ClassifierConfig
from infrastructure.catalog import default_catalog
from utilities.config import get_classification_settings


@lru_cache(maxsize=1)
def load_exercise_catalog() -> Dict[str, ClassifierConfig]:
    """
    Build the exercise catalog with the configured visibility threshold.
    Uses caching so every session shares the same configurations.
    """
    settings = get_classification_settings()
    return default_catalog(visibility_threshold=settings["VISIBILITY_THRESHOLD"])


async def get_exercise_catalog(connection: HTTPConnection) -> Dict[str, ClassifierConfig]:
    """
    Dependency for the exercise catalog.

    Returns the catalog built at startup from the app state, or loads it when
    the application was started without its lifespan.

    Args:
        connection: The HTTP request or WebSocket being served
    """
    catalog = getattr(connection.app.state, "exercise_catalog", None)
    if catalog is None:
        catalog = load_exercise_catalog()
    return catalog
