from .exercise_catalog import EXERCISES, default_catalog
from .factory import ClassifierFactory

__all__ = [
    "EXERCISES",
    "default_catalog",
    "ClassifierFactory",
]
