"""
Domain models for the FitTrack API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- Workout: A named, owned collection of exercise blocks (the Workouts row)
- WorkoutDocument: The nested structure stored in the Workouts `data` column
- ExerciseBlock: The sets performed for one catalog exercise
- WorkoutSet: A single performed set (reps, weight, unit)

Usage:
    >>> from domain.models import WorkoutDocument, ExerciseBlock, WorkoutSet

    >>> doc = WorkoutDocument(
    ...     exercises=[
    ...         ExerciseBlock(
    ...             exercise_id=1,
    ...             sets=[WorkoutSet(reps=10, weight=50, unit="kg")],
    ...         )
    ...     ]
    ... )
    >>> doc.total_sets
    1
"""

from domain.models.exercise_block import ExerciseBlock
from domain.models.workout import Workout, WorkoutDocument
from domain.models.workout_set import DEFAULT_UNIT, WorkoutSet

__all__ = [
    "DEFAULT_UNIT",
    "ExerciseBlock",
    "Workout",
    "WorkoutDocument",
    "WorkoutSet",
]
