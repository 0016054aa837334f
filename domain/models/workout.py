"""
Workout aggregate and its persisted document.

The Workouts table stores the nested exercise/set structure as a single
JSONB column (`data`). `WorkoutDocument` is that column; `Workout` is the
full row as returned by the API.
"""

from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from domain.models.exercise_block import ExerciseBlock
from domain.models.workout_set import WorkoutSet


class WorkoutDocument(BaseModel):
    """
    Semi-structured payload of a workout: `{exercises: [{exercise_id, sets: [...]}]}`.

    Order of blocks and sets is preserved as submitted.
    """

    exercises: List[ExerciseBlock] = Field(..., min_length=1)

    def iter_sets(self) -> Iterator[Tuple[ExerciseBlock, WorkoutSet]]:
        """Yield every (block, set) pair in submission order."""
        for block in self.exercises:
            for workout_set in block.sets:
                yield block, workout_set

    @property
    def total_sets(self) -> int:
        return sum(len(block.sets) for block in self.exercises)

    def to_json(self) -> Dict[str, Any]:
        """Serialize for the JSONB column, omitting unset display hints."""
        return self.model_dump(mode="json", exclude_none=True)


class Workout(BaseModel):
    """
    A named, owned, timestamped collection of exercise blocks.

    `likes_count` is maintained only by the like toggle and always equals the
    number of WorkoutLikes rows for this workout. Rows written before the
    column existed may carry NULL, which reads as 0.
    """

    id: Union[int, str]
    user_id: str
    name: str
    data: Dict[str, Any] = Field(default_factory=dict)
    is_public: bool = False
    likes_count: int = Field(default=0, ge=0)
    created_at: Optional[datetime] = None

    @field_validator("likes_count", mode="before")
    @classmethod
    def default_likes_count(cls, v):
        """NULL counters read as zero."""
        return 0 if v is None else v

    @field_validator("is_public", mode="before")
    @classmethod
    def default_is_public(cls, v):
        return bool(v)
