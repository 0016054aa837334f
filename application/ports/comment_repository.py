"""
Comment Repository Interface (Port).

Append-only comment list per workout.
"""
from typing import Protocol, List, Dict, Any

from application.ports.workout_repository import WorkoutId


class CommentRepository(Protocol):
    """Abstract interface for workout comment persistence."""

    def list_for_workout(self, workout_id: WorkoutId) -> List[Dict[str, Any]]:
        """
        Get all comments on a workout.

        Returns:
            Comment rows ordered by created_at ascending
        """
        ...

    def add(self, workout_id: WorkoutId, user_id: str, content: str) -> Dict[str, Any]:
        """
        Append a comment.

        Args:
            workout_id: Workouts.id
            user_id: Users.id of the author
            content: Already trimmed, non-empty text

        Returns:
            The inserted comment row
        """
        ...
