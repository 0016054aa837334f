"""
WorkoutSet value object - one performed set inside an exercise block.
"""

from pydantic import BaseModel, Field, field_validator


DEFAULT_UNIT = "kg"
MAX_UNIT_LENGTH = 16


class WorkoutSet(BaseModel):
    """
    Value object representing a single performed set.

    The unit is stored exactly as the client sent it ("kg", "lb", ...).
    Weights are never converted between units, so aggregating sets with
    different units is left to the reader.

    Examples:
        >>> WorkoutSet(reps=10, weight=50, unit="kg")
        WorkoutSet(reps=10, weight=50.0, unit='kg')
    """

    reps: int = Field(..., ge=1, description="Repetitions performed")
    weight: float = Field(..., ge=0, description="Load lifted, in `unit`")
    unit: str = Field(
        default=DEFAULT_UNIT,
        min_length=1,
        max_length=MAX_UNIT_LENGTH,
        description="Free-form unit of measure (e.g. 'kg', 'lb')",
    )

    @field_validator("unit", mode="before")
    @classmethod
    def strip_unit(cls, v):
        """Blank or missing units fall back to the default."""
        if v is None:
            return DEFAULT_UNIT
        if isinstance(v, str):
            v = v.strip()
            return v or DEFAULT_UNIT
        return v
