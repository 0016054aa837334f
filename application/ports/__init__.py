"""
Repository Interfaces (Ports) for the FitTrack API.

This package defines abstract interfaces that decouple use cases from
infrastructure (database, storage, external services). Implementations are
provided in the infrastructure layer; in-memory fakes live in tests/fakes.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use cases need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutRepository

    class ToggleLikeUseCase:
        def __init__(self, workout_repo: WorkoutRepository):
            self._workout_repo = workout_repo
"""

# Workouts, likes and comments
from application.ports.workout_repository import (
    WorkoutRepository,
    LikeToggleResult,
    WorkoutId,
)
from application.ports.comment_repository import CommentRepository

# Exercise catalog and per-set history
from application.ports.exercises_repository import ExercisesRepository
from application.ports.exercise_log_repository import ExerciseLogRepository

# Users and avatars
from application.ports.user_repository import UserRepository, USER_COLUMNS
from application.ports.avatar_storage import AvatarStorage

# External services
from application.ports.nutrition_service import NutritionService

__all__ = [
    # Workout
    "WorkoutRepository",
    "LikeToggleResult",
    "WorkoutId",
    "CommentRepository",
    # Exercises
    "ExercisesRepository",
    "ExerciseLogRepository",
    # Users
    "UserRepository",
    "USER_COLUMNS",
    "AvatarStorage",
    # External
    "NutritionService",
]
