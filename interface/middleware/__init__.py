from .cors import add_cors_middleware

__all__ = ["add_cors_middleware"]
