from interface.routers.exercise_router import exercise_router

__all__ = ["exercise_router"]
