from contextlib import asynccontextmanager
from fastapi import FastAPI

from infrastructure.di import load_exercise_catalog
from utilities.monitoring import MonitoringFactory

logger = MonitoringFactory.get_logger("lifespan")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI application.

    Builds the exercise catalog once at startup and writes the collected
    session metrics on shutdown.

    Args:
        app: FastAPI application instance
    """
    try:
        logger.info("Loading exercise catalog...")
        app.state.exercise_catalog = load_exercise_catalog()
        logger.info(f"Exercise catalog loaded with {len(app.state.exercise_catalog)} exercises")
    except Exception as e:
        logger.error(f"Error loading exercise catalog: {e}")
        raise

    yield  # Application runs here

    monitoring = MonitoringFactory.get_monitoring_service()
    for name, stats in monitoring.metrics_collector.summarize().items():
        logger.info(f"{name}: {stats}")
    try:
        output_file = monitoring.export_metrics()
        if output_file:
            logger.info(f"Session metrics written to {output_file}")
    except OSError as e:
        logger.error(f"Error exporting metrics: {e}")
    logger.info("Shutdown complete")
