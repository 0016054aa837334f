"""
CreateWorkout Use Case.

Validates a workout submission and persists it as one Workouts row (the
nested document used for display) plus one ExerciseLog row per performed set
(the flat history used for streaks and "last weight used" lookups).

Both writes happen in a single repository call that is atomic: if the log
insert fails the workout is rolled back and the whole operation is reported
as failed.
"""

import logging
from datetime import date
from typing import Any, Callable, Optional

from application.exceptions import InvalidArgument
from application.ports import WorkoutRepository
from domain.converters import (
    CompositionError,
    db_row_to_workout,
    document_to_log_rows,
    submission_to_document,
    workout_to_db_row,
)
from domain.converters.submission_to_workout import document_summary
from domain.models import Workout

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 120


class CreateWorkoutUseCase:
    """
    Use case for composing and saving a workout.

    Orchestrates the following workflow:
    1. Validate owner, name and presence of exercise blocks
    2. Normalize blocks (drop incomplete sets and empty blocks, coerce numbers)
    3. Build the Workouts row and the per-set ExerciseLog rows
    4. Persist both atomically via the repository

    No write happens if any validation step fails.

    Usage:
        >>> use_case = CreateWorkoutUseCase(workout_repo=workout_repo)
        >>> workout = use_case.execute(
        ...     owner_id="user-123",
        ...     name="Push day",
        ...     exercises=[{"exercise_id": 1, "sets": [{"reps": 10, "weight": 50, "unit": "kg"}]}],
        ...     is_public=True,
        ... )
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository for atomic workout + log persistence
            today: Clock used when the caller does not send its local date
        """
        self._workout_repo = workout_repo
        self._today = today

    def execute(
        self,
        owner_id: Optional[str],
        name: Optional[str],
        exercises: Any,
        is_public: bool = False,
        log_date: Optional[date] = None,
    ) -> Workout:
        """
        Create a workout.

        Args:
            owner_id: Users.id of the owner
            name: Workout name (trimmed before storing)
            exercises: Submitted blocks `[{exercise_id, sets: [{reps, weight, unit}]}]`
            is_public: Whether the workout shows up in other users' feeds
            log_date: Caller's local calendar date for the ExerciseLog rows

        Returns:
            The persisted Workout

        Raises:
            InvalidArgument: If required fields are missing or nothing valid remains
            WorkoutCreationError: If the atomic insert fails
        """
        owner_id = str(owner_id).strip() if owner_id is not None else ""
        name = name.strip() if isinstance(name, str) else ""

        if not owner_id or not name or not isinstance(exercises, (list, tuple)) or not exercises:
            raise InvalidArgument("user_id, name and exercises are required")
        if len(name) > MAX_NAME_LENGTH:
            raise InvalidArgument(f"name must be at most {MAX_NAME_LENGTH} characters")

        try:
            document = submission_to_document(exercises)
        except CompositionError as e:
            raise InvalidArgument(e.message) from e

        day = log_date or self._today()
        workout_row = workout_to_db_row(owner_id, name, document, bool(is_public))
        log_rows = document_to_log_rows(owner_id, document, day)

        inserted = self._workout_repo.create_with_logs(workout_row, log_rows)

        summary = document_summary(document)
        logger.info(
            f"Workout {inserted.get('id')} created for user {owner_id}: "
            f"{summary['exercises']} exercise(s), {summary['sets']} set(s) logged on {day.isoformat()}"
        )
        return db_row_to_workout(inserted)
