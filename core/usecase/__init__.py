from .classification_usecase import ClassificationEngine

__all__ = [
    "ClassificationEngine",
]
