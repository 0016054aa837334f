"""
Workouts router for composition, the feed, likes and comments.

This router contains endpoints for:
- POST /workouts - Create a workout and its ExerciseLog rows atomically
- GET /workouts - List workouts visible to a viewer
- POST /workouts/{workout_id}/like - Toggle a like
- GET /workouts/{workout_id}/comments - List comments, oldest first
- POST /workouts/{workout_id}/comments - Add a comment
"""

import datetime
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from api.deps import (
    get_add_comment_use_case,
    get_create_workout_use_case,
    get_list_comments_use_case,
    get_list_workouts_use_case,
    get_toggle_like_use_case,
)
from application.use_cases import (
    AddCommentUseCase,
    CreateWorkoutUseCase,
    ListCommentsUseCase,
    ListVisibleWorkoutsUseCase,
    ToggleLikeUseCase,
)

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


# =============================================================================
# Request Models
# =============================================================================


class CreateWorkoutRequest(BaseModel):
    """
    Request model for creating a workout.

    `exercises` is validated and normalized by CreateWorkoutUseCase so that
    incomplete sets are filtered rather than rejected. `date` is the
    caller's local calendar date for the ExerciseLog rows.
    """
    user_id: Optional[str] = None
    name: Optional[str] = None
    exercises: Any = None
    is_public: bool = False
    date: Optional[datetime.date] = None


class ToggleLikeRequest(BaseModel):
    user_id: Optional[str] = None


class AddCommentRequest(BaseModel):
    user_id: Optional[str] = None
    content: Optional[str] = None


# =============================================================================
# Workouts
# =============================================================================


@router.post("")
def create_workout(
    request: CreateWorkoutRequest,
    use_case: CreateWorkoutUseCase = Depends(get_create_workout_use_case),
):
    """
    Create a workout.

    Blocks without an exercise_id and sets missing reps or weight are
    dropped; if nothing remains the request fails with 400 and nothing is
    written.

    Returns:
        The inserted workout row
    """
    workout = use_case.execute(
        owner_id=request.user_id,
        name=request.name,
        exercises=request.exercises,
        is_public=request.is_public,
        log_date=request.date,
    )
    return workout.model_dump(mode="json")


@router.get("")
def list_workouts(
    viewer_id: Optional[str] = Query(None, description="Users.id of the viewer"),
    use_case: ListVisibleWorkoutsUseCase = Depends(get_list_workouts_use_case),
):
    """
    List workouts visible to the viewer, newest first.

    Without viewer_id only public workouts are returned.
    """
    workouts = use_case.execute(viewer_id=viewer_id)
    return [w.model_dump(mode="json") for w in workouts]


# =============================================================================
# Likes
# =============================================================================


@router.post("/{workout_id}/like")
def toggle_like(
    workout_id: int,
    request: ToggleLikeRequest,
    use_case: ToggleLikeUseCase = Depends(get_toggle_like_use_case),
):
    """
    Like the workout, or remove the like if the user already liked it.

    Returns:
        {id, likes_count, liked}
    """
    return use_case.execute(workout_id=workout_id, user_id=request.user_id).to_dict()


# =============================================================================
# Comments
# =============================================================================


@router.get("/{workout_id}/comments")
def list_comments(
    workout_id: int,
    use_case: ListCommentsUseCase = Depends(get_list_comments_use_case),
):
    return use_case.execute(workout_id)


@router.post("/{workout_id}/comments")
def add_comment(
    workout_id: int,
    request: AddCommentRequest,
    use_case: AddCommentUseCase = Depends(get_add_comment_use_case),
):
    """Add a comment; content is trimmed and must not be empty."""
    return use_case.execute(
        workout_id=workout_id,
        user_id=request.user_id,
        content=request.content,
    )
