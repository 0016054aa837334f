"""
Exercise log router.

This router contains endpoints for:
- POST /logs - Record a log row
- GET /logs/last - Most recent row for a user/exercise pair
- GET /logs/history - Rows for a user/exercise pair, newest first
- GET /logs/streak - Consecutive-day activity summary
"""

import datetime
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from api.deps import (
    get_history_use_case,
    get_last_log_use_case,
    get_log_exercise_use_case,
    get_streak_use_case,
)
from application.use_cases import (
    GetActivityStreakUseCase,
    GetExerciseHistoryUseCase,
    GetLastLogUseCase,
    LogExerciseUseCase,
)
from application.use_cases.exercise_log import DEFAULT_HISTORY_LIMIT

router = APIRouter(
    prefix="/logs",
    tags=["Logs"],
)


class CreateLogRequest(BaseModel):
    """Request model for POST /logs. Numeric fields are coerced by the use case."""
    user_id: Optional[str] = None
    exercise_id: Any = None
    sets: Any = None
    reps: Any = None
    weight: Any = None
    date: Optional[datetime.date] = None


@router.post("")
def create_log(
    request: CreateLogRequest,
    use_case: LogExerciseUseCase = Depends(get_log_exercise_use_case),
):
    """Insert one ExerciseLog row; `date` defaults to today."""
    return use_case.execute(
        user_id=request.user_id,
        exercise_id=request.exercise_id,
        sets=request.sets,
        reps=request.reps,
        weight=request.weight,
        log_date=request.date,
    )


@router.get("/last")
def get_last_log(
    user_id: Optional[str] = Query(None),
    exercise_id: Optional[int] = Query(None),
    use_case: GetLastLogUseCase = Depends(get_last_log_use_case),
):
    """
    Get the latest log for a user/exercise pair.

    Returns:
        The most recent row by date, or null when none exists
    """
    return use_case.execute(user_id=user_id, exercise_id=exercise_id)


@router.get("/history")
def get_history(
    user_id: Optional[str] = Query(None),
    exercise_id: Optional[int] = Query(None),
    limit: int = Query(DEFAULT_HISTORY_LIMIT),
    use_case: GetExerciseHistoryUseCase = Depends(get_history_use_case),
):
    """Get log rows for a user/exercise pair ordered by date desc."""
    return use_case.execute(user_id=user_id, exercise_id=exercise_id, limit=limit)


@router.get("/streak")
def get_streak(
    user_id: Optional[str] = Query(None),
    use_case: GetActivityStreakUseCase = Depends(get_streak_use_case),
):
    """Get current and longest consecutive-day streaks for a user."""
    return use_case.execute(user_id=user_id).to_dict()
