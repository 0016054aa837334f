"""
API package for the FitTrack API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_workout_repo,
    get_comment_repo,
    get_exercises_repo,
    get_exercise_log_repo,
    get_user_repo,
    get_avatar_storage,
    get_nutrition_service,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories and services
    "get_workout_repo",
    "get_comment_repo",
    "get_exercises_repo",
    "get_exercise_log_repo",
    "get_user_repo",
    "get_avatar_storage",
    "get_nutrition_service",
]
