"""
Converters: domain models <-> Supabase row format.

Database schema (Workouts table):
- id: bigint
- user_id: Users.id (uuid)
- name: text
- data: JSONB (WorkoutDocument)
- is_public: boolean
- likes_count: integer, NULL on rows written before the column existed
- created_at: timestamptz

Database schema (ExerciseLog table):
- user_id, exercise_id, date
- sets: always 1 for rows derived from a workout (one row per performed set);
  older rows may hold a pre-aggregated count
- reps, weight
"""

from datetime import date
from typing import Any, Dict, List, Mapping

from domain.models import Workout, WorkoutDocument


def workout_to_db_row(
    owner_id: str,
    name: str,
    document: WorkoutDocument,
    is_public: bool,
) -> Dict[str, Any]:
    """Build the Workouts insert payload. Counter starts at zero."""
    return {
        "user_id": owner_id,
        "name": name,
        "data": document.to_json(),
        "is_public": bool(is_public),
        "likes_count": 0,
    }


def document_to_log_rows(
    owner_id: str,
    document: WorkoutDocument,
    log_date: date,
) -> List[Dict[str, Any]]:
    """
    Flatten a workout document into one ExerciseLog row per set.

    Units are not carried over; ExerciseLog has no unit column and weights are
    never converted.
    """
    day = log_date.isoformat()
    return [
        {
            "user_id": owner_id,
            "exercise_id": block.exercise_id,
            "date": day,
            "sets": 1,
            "reps": workout_set.reps,
            "weight": workout_set.weight,
        }
        for block, workout_set in document.iter_sets()
    ]


def db_row_to_workout(row: Mapping[str, Any]) -> Workout:
    """Parse a Workouts row (likes_count NULL reads as 0)."""
    return Workout.model_validate(dict(row))
