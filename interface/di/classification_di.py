from fastapi import Depends
from typing import Dict

from core.entities.classifier_config import ClassifierConfig
from core.usecase import ClassificationEngine
from infrastructure.catalog import ClassifierFactory
from infrastructure.di import get_exercise_catalog


def get_classification_engine(
    catalog: Dict[str, ClassifierConfig] = Depends(get_exercise_catalog),
) -> ClassificationEngine:
    """
    Get a new ClassificationEngine.

    Not cached: every WebSocket session owns its own engine and classifiers.

    Args:
        catalog: Exercise identifier to classifier configuration bindings

    Returns:
        ClassificationEngine instance with one classifier per catalog entry
    """
    return ClassificationEngine.from_catalog(catalog, ClassifierFactory.create)
