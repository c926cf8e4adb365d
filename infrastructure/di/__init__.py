from .catalog import load_exercise_catalog, get_exercise_catalog

__all__ = [
    "load_exercise_catalog",
    "get_exercise_catalog",
]
