"""
Exercises router for the read-only exercise catalog.

This router contains endpoints for:
- GET /exercises - List catalog exercises, optionally by muscle group
- GET /exercises/{exercise_id} - Get a single exercise
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_exercises_repo
from application.exceptions import NotFound
from application.ports import ExercisesRepository

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


@router.get("")
def list_exercises(
    muscle: Optional[str] = Query(None, description="Filter by muscle group (exact match)"),
    exercises_repo: ExercisesRepository = Depends(get_exercises_repo),
):
    """
    List exercises from the catalog.

    Args:
        muscle: Optional muscle group filter (e.g. "chest")

    Returns:
        Array of exercise rows
    """
    return exercises_repo.list_exercises(muscle_group=muscle or None)


@router.get("/{exercise_id}")
def get_exercise(
    exercise_id: int,
    exercises_repo: ExercisesRepository = Depends(get_exercises_repo),
):
    """Get a single exercise by ID."""
    exercise = exercises_repo.get(exercise_id)
    if exercise is None:
        raise NotFound(f"Exercise {exercise_id} not found")
    return exercise
