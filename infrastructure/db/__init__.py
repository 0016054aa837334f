"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations are injected into use cases
through api/deps.py.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseWorkoutRepository,
        SupabaseCommentRepository,
        SupabaseExercisesRepository,
        SupabaseExerciseLogRepository,
        SupabaseUserRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    workout_repo = SupabaseWorkoutRepository(client)
    comment_repo = SupabaseCommentRepository(client)
    user_repo = SupabaseUserRepository(client)
"""

from infrastructure.db.workout_repository import SupabaseWorkoutRepository
from infrastructure.db.comment_repository import SupabaseCommentRepository
from infrastructure.db.exercises_repository import SupabaseExercisesRepository
from infrastructure.db.exercise_log_repository import SupabaseExerciseLogRepository
from infrastructure.db.user_repository import SupabaseUserRepository

__all__ = [
    # Workouts, likes and comments
    "SupabaseWorkoutRepository",
    "SupabaseCommentRepository",

    # Exercise catalog and history
    "SupabaseExercisesRepository",
    "SupabaseExerciseLogRepository",

    # Users
    "SupabaseUserRepository",
]
