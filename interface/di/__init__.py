from interface.di.classification_di import get_classification_engine

__all__ = [
    "get_classification_engine",
]
