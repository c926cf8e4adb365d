from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from utilities.validators import AppConfig


def add_cors_middleware(app: FastAPI, config: AppConfig) -> None:
    """Allow the configured origins, methods and headers."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=config.ALLOWED_METHODS,
        allow_headers=config.ALLOWED_HEADERS,
        expose_headers=["*"],
        max_age=600,
    )
