"""
Domain layer for the FitTrack API.

This package contains pure domain models and converters that are
independent of infrastructure concerns (database, API, external services).
"""

from domain.models import (
    ExerciseBlock,
    Workout,
    WorkoutDocument,
    WorkoutSet,
)

__all__ = [
    "ExerciseBlock",
    "Workout",
    "WorkoutDocument",
    "WorkoutSet",
]
