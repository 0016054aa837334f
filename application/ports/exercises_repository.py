"""
Exercises Repository Interface (Port).

Read-only access to the static exercise catalog. The catalog is seeded by
scripts/seed_exercises.py and never written by the API.
"""
from typing import Protocol, Optional, List, Dict, Any, Union


class ExercisesRepository(Protocol):
    """Abstract interface for exercise catalog lookups."""

    def list_exercises(self, muscle_group: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List catalog exercises.

        Args:
            muscle_group: Optional equality filter on muscle_group

        Returns:
            List of exercise rows
        """
        ...

    def get(self, exercise_id: Union[int, str]) -> Optional[Dict[str, Any]]:
        """Get a single exercise by ID, or None."""
        ...
