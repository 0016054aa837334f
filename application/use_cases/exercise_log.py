"""
Exercise log use cases.

- LogExerciseUseCase: record a single (possibly pre-aggregated) log row
- GetLastLogUseCase: "previous set" lookup for the logging form
- GetExerciseHistoryUseCase: per-exercise history, newest first
- GetActivityStreakUseCase: consecutive-day streak from the flat log
"""

import logging
from dataclasses import dataclass, asdict
from datetime import date, timedelta
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from application.exceptions import InvalidArgument
from application.ports import ExerciseLogRepository
from domain.converters.submission_to_workout import (
    CompositionError,
    coerce_exercise_id,
    coerce_reps,
    coerce_weight,
)

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50
MAX_HISTORY_LIMIT = 500


def _require_ids(user_id: Any, exercise_id: Any) -> None:
    if not user_id or not exercise_id:
        raise InvalidArgument("user_id and exercise_id are required")


class LogExerciseUseCase:
    """Use case for POST /logs."""

    def __init__(
        self,
        log_repo: ExerciseLogRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._log_repo = log_repo
        self._today = today

    def execute(
        self,
        user_id: Optional[str],
        exercise_id: Any,
        sets: Any,
        reps: Any,
        weight: Any,
        log_date: Optional[date] = None,
    ) -> Dict[str, Any]:
        """
        Insert one ExerciseLog row.

        All of user_id, exercise_id, sets, reps and weight are required and
        must be non-zero; `log_date` defaults to today.

        Raises:
            InvalidArgument: On missing or non-numeric fields
        """
        if not all([user_id, exercise_id, sets, reps, weight]):
            raise InvalidArgument("Missing required fields")

        try:
            set_count = coerce_reps(sets)
        except CompositionError as e:
            raise InvalidArgument("sets must be a positive whole number") from e

        try:
            row = {
                "user_id": str(user_id).strip(),
                "exercise_id": coerce_exercise_id(exercise_id),
                "sets": set_count,
                "reps": coerce_reps(reps),
                "weight": coerce_weight(weight),
                "date": (log_date or self._today()).isoformat(),
            }
        except CompositionError as e:
            raise InvalidArgument(e.message) from e

        inserted = self._log_repo.add(row)
        logger.info(f"Exercise log added for user {row['user_id']} (exercise {row['exercise_id']})")
        return inserted


class GetLastLogUseCase:
    """Use case for GET /logs/last."""

    def __init__(self, log_repo: ExerciseLogRepository) -> None:
        self._log_repo = log_repo

    def execute(self, user_id: Optional[str], exercise_id: Any) -> Optional[Dict[str, Any]]:
        """Return the most recent log row for the pair, or None."""
        _require_ids(user_id, exercise_id)
        return self._log_repo.get_last(user_id, exercise_id)


class GetExerciseHistoryUseCase:
    """Use case for GET /logs/history."""

    def __init__(self, log_repo: ExerciseLogRepository) -> None:
        self._log_repo = log_repo

    def execute(
        self,
        user_id: Optional[str],
        exercise_id: Any,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> List[Dict[str, Any]]:
        _require_ids(user_id, exercise_id)
        if limit < 1 or limit > MAX_HISTORY_LIMIT:
            raise InvalidArgument(f"limit must be between 1 and {MAX_HISTORY_LIMIT}")
        return self._log_repo.get_history(user_id, exercise_id, limit=limit)


# =============================================================================
# Streaks
# =============================================================================


@dataclass
class ActivityStreak:
    """Consecutive-day activity summary for a user."""
    user_id: str
    current_streak: int
    longest_streak: int
    active_days: int
    total_sets: int
    last_active: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _parse_day(value: Union[str, date]) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def compute_streaks(days: Iterable[date], today: date) -> Dict[str, int]:
    """
    Compute current and longest streaks from a set of active days.

    The current streak ends today, or yesterday when nothing has been logged
    yet today; otherwise it is 0.

    Examples:
        >>> compute_streaks([date(2024, 1, 1), date(2024, 1, 2)], today=date(2024, 1, 3))
        {'current': 2, 'longest': 2}
    """
    active = set(days)
    if not active:
        return {"current": 0, "longest": 0}

    current = 0
    cursor = today if today in active else today - timedelta(days=1)
    while cursor in active:
        current += 1
        cursor -= timedelta(days=1)

    longest = 0
    run = 0
    previous: Optional[date] = None
    for day in sorted(active):
        run = run + 1 if previous is not None and day - previous == timedelta(days=1) else 1
        longest = max(longest, run)
        previous = day

    return {"current": current, "longest": longest}


class GetActivityStreakUseCase:
    """Use case for GET /logs/streak."""

    def __init__(
        self,
        log_repo: ExerciseLogRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._log_repo = log_repo
        self._today = today

    def execute(self, user_id: Optional[str]) -> ActivityStreak:
        if not user_id or not str(user_id).strip():
            raise InvalidArgument("user_id is required")

        rows = self._log_repo.get_activity(user_id)
        days = set()
        total_sets = 0
        for row in rows:
            if not row.get("date"):
                continue
            days.add(_parse_day(row["date"]))
            total_sets += int(row.get("sets") or 1)

        streaks = compute_streaks(days, self._today())
        return ActivityStreak(
            user_id=user_id,
            current_streak=streaks["current"],
            longest_streak=streaks["longest"],
            active_days=len(days),
            total_sets=total_sets,
            last_active=max(days).isoformat() if days else None,
        )
