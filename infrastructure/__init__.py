"""
Infrastructure Layer for the FitTrack API.

This package contains concrete implementations of the application ports:
- db/: Supabase database implementations
- storage/: Supabase Storage implementations
- nutrition_client: API Ninjas nutrition lookup over httpx
"""

# Re-export adapters for convenient access
from infrastructure.db import (
    SupabaseWorkoutRepository,
    SupabaseCommentRepository,
    SupabaseExercisesRepository,
    SupabaseExerciseLogRepository,
    SupabaseUserRepository,
)
from infrastructure.storage import SupabaseAvatarStorage
from infrastructure.nutrition_client import NinjasNutritionClient

__all__ = [
    "SupabaseWorkoutRepository",
    "SupabaseCommentRepository",
    "SupabaseExercisesRepository",
    "SupabaseExerciseLogRepository",
    "SupabaseUserRepository",
    "SupabaseAvatarStorage",
    "NinjasNutritionClient",
]
