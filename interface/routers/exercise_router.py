from fastapi import APIRouter, Depends, status, Response, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address
from typing import Dict, List

from core.entities.classifier_config import ClassifierConfig
from infrastructure.di import get_exercise_catalog
from interface.schemas import ExerciseDetail, ExerciseSummary
from utilities.monitoring import MonitoringFactory

logger = MonitoringFactory.get_logger("interface.routers.exercise")

exercise_router = APIRouter(
    prefix="/exercises",
    tags=["v1-exercises"],
    responses={
        status.HTTP_404_NOT_FOUND: {"description": "Exercise not found"},
    },
)

limiter = Limiter(key_func=get_remote_address)


@exercise_router.get("", response_model=List[ExerciseSummary], status_code=status.HTTP_200_OK)
@limiter.limit("60/minute")
async def list_exercises(
    request: Request,
    response: Response,
    catalog: Dict[str, ClassifierConfig] = Depends(get_exercise_catalog),
):
    """
    Endpoint to list the exercise identifiers with their classifier pattern.
    """
    return [
        ExerciseSummary(id=exercise_id, pattern=config.pattern)
        for exercise_id, config in sorted(catalog.items())
    ]


@exercise_router.get("/{exercise_id}", response_model=ExerciseDetail, status_code=status.HTTP_200_OK)
@limiter.limit("60/minute")
async def get_exercise(
    exercise_id: str,
    request: Request,
    response: Response,
    catalog: Dict[str, ClassifierConfig] = Depends(get_exercise_catalog),
):
    """
    Endpoint to get one exercise with its classifier thresholds and cues.
    """
    config = catalog.get(exercise_id)
    if config is None:
        logger.error(f"Exercise not found: {exercise_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    logger.info(f"Exercise found: {exercise_id}")
    return ExerciseDetail(id=exercise_id, pattern=config.pattern, config=config.model_dump(mode="json"))
