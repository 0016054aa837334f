"""
FastAPI Dependency Providers for the FitTrack API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and the Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Use case providers compose repositories; routers only depend on use cases

Usage in routers:
    from api.deps import get_toggle_like_use_case
    from application.use_cases import ToggleLikeUseCase

    @router.post("/workouts/{workout_id}/like")
    def toggle_like(
        workout_id: int,
        use_case: ToggleLikeUseCase = Depends(get_toggle_like_use_case),
    ):
        ...

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_repo] = lambda: FakeWorkoutRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    AvatarStorage,
    CommentRepository,
    ExerciseLogRepository,
    ExercisesRepository,
    NutritionService,
    UserRepository,
    WorkoutRepository,
)
from application.use_cases import (
    AddCommentUseCase,
    CreateWorkoutUseCase,
    EnsureProfileUseCase,
    GetActivityStreakUseCase,
    GetExerciseHistoryUseCase,
    GetLastLogUseCase,
    ListCommentsUseCase,
    ListVisibleWorkoutsUseCase,
    LogExerciseUseCase,
    SyncAuthUseCase,
    ToggleLikeUseCase,
    UpdateProfileUseCase,
    UploadAvatarUseCase,
)

# Concrete implementations
from infrastructure import (
    NinjasNutritionClient,
    SupabaseAvatarStorage,
    SupabaseCommentRepository,
    SupabaseExerciseLogRepository,
    SupabaseExercisesRepository,
    SupabaseUserRepository,
    SupabaseWorkoutRepository,
)

from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings. create_app()
    overrides this provider with the settings the app was built with.
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def _create_supabase_client(url: str, key: str) -> Client:
    """One client per (url, key) for the lifetime of the process."""
    return create_client(url, key)


def get_supabase_client(
    settings: Settings = Depends(get_settings),
) -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    if not settings.supabase_configured:
        return None
    return _create_supabase_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required(
    client: Optional[Client] = Depends(get_supabase_client),
) -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_workout_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutRepository:
    """
    Get WorkoutRepository implementation.

    Returns a SupabaseWorkoutRepository instance with injected client.
    The return type is the Protocol to enable easy mocking.
    """
    return SupabaseWorkoutRepository(client)


def get_comment_repo(
    client: Client = Depends(get_supabase_client_required),
) -> CommentRepository:
    return SupabaseCommentRepository(client)


def get_exercises_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ExercisesRepository:
    return SupabaseExercisesRepository(client)


def get_exercise_log_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ExerciseLogRepository:
    return SupabaseExerciseLogRepository(client)


def get_user_repo(
    client: Client = Depends(get_supabase_client_required),
) -> UserRepository:
    return SupabaseUserRepository(client)


def get_avatar_storage(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> AvatarStorage:
    """Get AvatarStorage backed by the configured Supabase Storage bucket."""
    return SupabaseAvatarStorage(client, bucket=settings.avatar_bucket)


def get_nutrition_service(
    settings: Settings = Depends(get_settings),
) -> Optional[NutritionService]:
    """
    Get the nutrition lookup client.

    Returns:
        NutritionService, or None if NINJAS_API_KEY is not configured
    """
    if not settings.ninjas_api_key:
        return None
    return NinjasNutritionClient(
        api_key=settings.ninjas_api_key,
        base_url=settings.nutrition_api_url,
        timeout=settings.nutrition_timeout_seconds,
    )


# =============================================================================
# Use Case Providers
# =============================================================================


def get_toggle_like_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> ToggleLikeUseCase:
    return ToggleLikeUseCase(workout_repo=workout_repo)


def get_create_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> CreateWorkoutUseCase:
    return CreateWorkoutUseCase(workout_repo=workout_repo)


def get_list_workouts_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> ListVisibleWorkoutsUseCase:
    return ListVisibleWorkoutsUseCase(workout_repo=workout_repo)


def get_list_comments_use_case(
    comment_repo: CommentRepository = Depends(get_comment_repo),
) -> ListCommentsUseCase:
    return ListCommentsUseCase(comment_repo=comment_repo)


def get_add_comment_use_case(
    comment_repo: CommentRepository = Depends(get_comment_repo),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> AddCommentUseCase:
    return AddCommentUseCase(comment_repo=comment_repo, workout_repo=workout_repo)


def get_log_exercise_use_case(
    log_repo: ExerciseLogRepository = Depends(get_exercise_log_repo),
) -> LogExerciseUseCase:
    return LogExerciseUseCase(log_repo=log_repo)


def get_last_log_use_case(
    log_repo: ExerciseLogRepository = Depends(get_exercise_log_repo),
) -> GetLastLogUseCase:
    return GetLastLogUseCase(log_repo=log_repo)


def get_history_use_case(
    log_repo: ExerciseLogRepository = Depends(get_exercise_log_repo),
) -> GetExerciseHistoryUseCase:
    return GetExerciseHistoryUseCase(log_repo=log_repo)


def get_streak_use_case(
    log_repo: ExerciseLogRepository = Depends(get_exercise_log_repo),
) -> GetActivityStreakUseCase:
    return GetActivityStreakUseCase(log_repo=log_repo)


def get_sync_auth_use_case(
    settings: Settings = Depends(get_settings),
) -> SyncAuthUseCase:
    return SyncAuthUseCase(admin_email=settings.admin_email)


def get_ensure_profile_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
) -> EnsureProfileUseCase:
    return EnsureProfileUseCase(user_repo=user_repo)


def get_update_profile_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
) -> UpdateProfileUseCase:
    return UpdateProfileUseCase(user_repo=user_repo)


def get_upload_avatar_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
    storage: AvatarStorage = Depends(get_avatar_storage),
    settings: Settings = Depends(get_settings),
) -> UploadAvatarUseCase:
    return UploadAvatarUseCase(
        user_repo=user_repo,
        storage=storage,
        max_bytes=settings.avatar_max_bytes,
    )


__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_workout_repo",
    "get_comment_repo",
    "get_exercises_repo",
    "get_exercise_log_repo",
    "get_user_repo",
    "get_avatar_storage",
    "get_nutrition_service",
    # Use cases
    "get_toggle_like_use_case",
    "get_create_workout_use_case",
    "get_list_workouts_use_case",
    "get_list_comments_use_case",
    "get_add_comment_use_case",
    "get_log_exercise_use_case",
    "get_last_log_use_case",
    "get_history_use_case",
    "get_streak_use_case",
    "get_sync_auth_use_case",
    "get_ensure_profile_use_case",
    "get_update_profile_use_case",
    "get_upload_avatar_use_case",
]
