"""
Application Use Cases for the FitTrack API.

This package contains application-level use cases that orchestrate domain
logic and coordinate between ports/adapters. Use cases are the entry points
for business operations; routers only translate HTTP to use case calls.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Failures are raised as application.exceptions errors

Usage:
    from application.use_cases import CreateWorkoutUseCase, ToggleLikeUseCase

    create = CreateWorkoutUseCase(workout_repo=workout_repo)
    workout = create.execute(
        owner_id="user-123",
        name="Leg day",
        exercises=[{"exercise_id": 3, "sets": [{"reps": 5, "weight": 100, "unit": "kg"}]}],
        is_public=True,
    )

    toggle = ToggleLikeUseCase(workout_repo=workout_repo)
    result = toggle.execute(workout_id=workout.id, user_id="user-456")
"""

from application.use_cases.create_workout import CreateWorkoutUseCase
from application.use_cases.exercise_log import (
    ActivityStreak,
    GetActivityStreakUseCase,
    GetExerciseHistoryUseCase,
    GetLastLogUseCase,
    LogExerciseUseCase,
    compute_streaks,
)
from application.use_cases.list_workouts import ListVisibleWorkoutsUseCase
from application.use_cases.sync_auth import SyncAuthUseCase
from application.use_cases.toggle_like import ToggleLikeUseCase
from application.use_cases.user_profile import (
    EnsureProfileUseCase,
    Goal,
    ProfileChanges,
    UpdateProfileUseCase,
    UploadAvatarUseCase,
)
from application.use_cases.workout_comments import AddCommentUseCase, ListCommentsUseCase

__all__ = [
    # Workouts
    "CreateWorkoutUseCase",
    "ListVisibleWorkoutsUseCase",
    "ToggleLikeUseCase",
    "AddCommentUseCase",
    "ListCommentsUseCase",
    # Exercise log
    "LogExerciseUseCase",
    "GetLastLogUseCase",
    "GetExerciseHistoryUseCase",
    "GetActivityStreakUseCase",
    "ActivityStreak",
    "compute_streaks",
    # Users
    "SyncAuthUseCase",
    "EnsureProfileUseCase",
    "UpdateProfileUseCase",
    "UploadAvatarUseCase",
    "ProfileChanges",
    "Goal",
]
