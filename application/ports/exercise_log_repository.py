"""
Exercise Log Repository Interface (Port).

ExerciseLog is a flat, per-set history used for read-side aggregation
(last weight used, per-exercise history, activity streaks).
"""
from typing import Protocol, Optional, List, Dict, Any, Union


class ExerciseLogRepository(Protocol):
    """Abstract interface for ExerciseLog persistence."""

    def add(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a single log row.

        Args:
            row: {user_id, exercise_id, sets, reps, weight, date}

        Returns:
            The inserted row
        """
        ...

    def get_last(self, user_id: str, exercise_id: Union[int, str]) -> Optional[Dict[str, Any]]:
        """Most recent row by date for a user/exercise pair, or None."""
        ...

    def get_history(
        self,
        user_id: str,
        exercise_id: Union[int, str],
        *,
        limit: int = 50,
    ) -> List[Dict[str, Any]]:
        """Rows for a user/exercise pair, newest date first."""
        ...

    def get_activity(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Get `{date, sets}` for every log row of a user.

        Used for streak computation; callers aggregate by date.
        """
        ...
