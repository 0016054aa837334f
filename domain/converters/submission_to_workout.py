"""
Converter: client workout submission -> WorkoutDocument.

The logging form sends every block it rendered, including half-filled rows:
blocks without an exercise picked, sets whose reps or weight inputs were left
empty. This converter applies the cleanup rules before anything is written:

1. Blocks without an `exercise_id` are dropped.
2. Sets missing `reps` or `weight` (None or blank string) are dropped.
3. Remaining reps/weight are coerced to numbers.
4. Blocks left without sets are dropped.
5. At least one block must remain.

All functions are pure and raise CompositionError (a ValueError) on input
that cannot be salvaged.
"""

import math
from typing import Any, Dict, List, Mapping, Optional, Sequence

from domain.models import DEFAULT_UNIT, ExerciseBlock, WorkoutDocument, WorkoutSet
from domain.models.workout_set import MAX_UNIT_LENGTH


EMPTY_WORKOUT_MESSAGE = "Add at least one exercise with one set"


class CompositionError(ValueError):
    """Raised when a workout submission cannot be normalized."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def _to_number(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise CompositionError(f"{field} must be a number")
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise CompositionError(f"{field} must be a number")
    if not math.isfinite(number):
        raise CompositionError(f"{field} must be a number")
    return number


def coerce_reps(value: Any) -> int:
    """Coerce a reps input to a positive integer."""
    number = _to_number(value, "reps")
    if not number.is_integer() or number < 1:
        raise CompositionError("reps must be a positive whole number")
    return int(number)


def coerce_weight(value: Any) -> float:
    """Coerce a weight input to a non-negative float."""
    number = _to_number(value, "weight")
    if number < 0:
        raise CompositionError("weight must not be negative")
    return number


def coerce_exercise_id(value: Any) -> int:
    number = _to_number(value, "exercise_id")
    if not number.is_integer() or number < 1:
        raise CompositionError("exercise_id must be a positive integer")
    return int(number)


def _clean_hint(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def normalize_sets(raw_sets: Optional[Sequence[Mapping[str, Any]]]) -> List[WorkoutSet]:
    """Drop incomplete sets and coerce the rest."""
    if raw_sets is not None and not isinstance(raw_sets, (list, tuple)):
        raise CompositionError("sets must be a list")
    sets: List[WorkoutSet] = []
    for raw in raw_sets or []:
        if not isinstance(raw, Mapping):
            raise CompositionError("each set must be an object")
        reps = raw.get("reps")
        weight = raw.get("weight")
        if _is_missing(reps) or _is_missing(weight):
            continue
        unit = raw.get("unit")
        if unit is not None and not isinstance(unit, str):
            raise CompositionError("unit must be a string")
        if unit is not None and len(unit.strip()) > MAX_UNIT_LENGTH:
            raise CompositionError(f"unit must be at most {MAX_UNIT_LENGTH} characters")
        sets.append(
            WorkoutSet(
                reps=coerce_reps(reps),
                weight=coerce_weight(weight),
                unit=unit if unit is not None else DEFAULT_UNIT,
            )
        )
    return sets


def submission_to_document(raw_blocks: Any) -> WorkoutDocument:
    """
    Normalize submitted exercise blocks into a WorkoutDocument.

    Args:
        raw_blocks: Sequence of `{exercise_id, sets: [{reps, weight, unit}]}`
            mappings as sent by the client.

    Returns:
        WorkoutDocument containing only complete sets and non-empty blocks,
        in submission order.

    Raises:
        CompositionError: If the input is not a non-empty list, a value cannot
            be coerced, or nothing is left after filtering.

    Examples:
        >>> doc = submission_to_document([
        ...     {"exercise_id": 1, "sets": [
        ...         {"reps": 10, "weight": 50, "unit": "kg"},
        ...         {"reps": "", "weight": "", "unit": "kg"},
        ...     ]},
        ...     {"exercise_id": 2, "sets": []},
        ... ])
        >>> [b.exercise_id for b in doc.exercises]
        [1]
    """
    if not isinstance(raw_blocks, (list, tuple)) or not raw_blocks:
        raise CompositionError("exercises must be a non-empty list")

    blocks: List[ExerciseBlock] = []
    for raw in raw_blocks:
        if not isinstance(raw, Mapping):
            raise CompositionError("each exercise must be an object")
        if _is_missing(raw.get("exercise_id")):
            continue

        sets = normalize_sets(raw.get("sets"))
        if not sets:
            continue

        blocks.append(
            ExerciseBlock(
                exercise_id=coerce_exercise_id(raw.get("exercise_id")),
                exercise_name=_clean_hint(raw.get("exercise_name")),
                muscle_group=_clean_hint(raw.get("muscle_group")),
                sets=sets,
            )
        )

    if not blocks:
        raise CompositionError(EMPTY_WORKOUT_MESSAGE)

    return WorkoutDocument(exercises=blocks)


def document_summary(document: WorkoutDocument) -> Dict[str, int]:
    """Counts used in log lines."""
    return {"exercises": len(document.exercises), "sets": document.total_sets}
