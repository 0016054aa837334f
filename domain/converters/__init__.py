"""
Domain converters between external formats and the workout domain model.

- submission_to_document: client exercise blocks -> WorkoutDocument
- workout_to_db_row / document_to_log_rows: domain -> Supabase rows
- db_row_to_workout: Supabase row -> Workout

All converters are pure functions with no side effects.

Examples:
    >>> from datetime import date
    >>> from domain.converters import submission_to_document, document_to_log_rows
    >>> doc = submission_to_document([{"exercise_id": 1, "sets": [{"reps": 5, "weight": 100}]}])
    >>> rows = document_to_log_rows("user-1", doc, date(2024, 1, 1))
"""

from domain.converters.db_converters import (
    db_row_to_workout,
    document_to_log_rows,
    workout_to_db_row,
)
from domain.converters.submission_to_workout import (
    EMPTY_WORKOUT_MESSAGE,
    CompositionError,
    coerce_exercise_id,
    coerce_reps,
    coerce_weight,
    submission_to_document,
)

__all__ = [
    "EMPTY_WORKOUT_MESSAGE",
    "CompositionError",
    "submission_to_document",
    "coerce_exercise_id",
    "coerce_reps",
    "coerce_weight",
    "db_row_to_workout",
    "document_to_log_rows",
    "workout_to_db_row",
]
