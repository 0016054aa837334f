"""
ExerciseBlock value object - one exercise and the sets performed for it.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.workout_set import WorkoutSet


class ExerciseBlock(BaseModel):
    """
    Value object grouping the sets performed for one catalog exercise.

    `exercise_name` and `muscle_group` are optional display hints copied from
    the catalog by the client; the catalog row referenced by `exercise_id`
    stays the source of truth.
    """

    exercise_id: int = Field(..., ge=1, description="Exercises.id")
    exercise_name: Optional[str] = Field(default=None, description="Display name hint")
    muscle_group: Optional[str] = Field(default=None, description="Muscle group hint")
    sets: List[WorkoutSet] = Field(..., min_length=1)
