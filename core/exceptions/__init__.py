from .classification import (
    ClassificationError,
    ClassifierRegistrationError,
    UnknownClassifierPatternError,
)

__all__ = [
    "ClassificationError",
    "ClassifierRegistrationError",
    "UnknownClassifierPatternError",
]
