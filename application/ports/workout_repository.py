"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence,
including the like membership table that backs the `likes_count` counter.
Implementations may use Supabase, in-memory storage, or other backends.
"""
from dataclasses import dataclass
from typing import Protocol, Optional, List, Dict, Any, Union


WorkoutId = Union[int, str]


@dataclass
class LikeToggleResult:
    """Outcome of a like toggle."""
    id: WorkoutId
    likes_count: int
    liked: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "likes_count": self.likes_count, "liked": self.liked}


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence operations.

    Implementations must keep `likes_count` equal to the number of like rows
    for the workout. Both `toggle_like` and `create_with_logs` must be
    atomic with respect to concurrent callers.
    """

    def get(self, workout_id: WorkoutId) -> Optional[Dict[str, Any]]:
        """
        Get a single workout by ID.

        Args:
            workout_id: Workouts.id

        Returns:
            Workout row or None if not found
        """
        ...

    def list_visible(self, viewer_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List workouts a viewer may see, newest first.

        Args:
            viewer_id: Users.id of the viewer. When given, returns all public
                workouts plus the viewer's own private ones. When None,
                returns public workouts only.

        Returns:
            List of workout rows ordered by created_at desc
        """
        ...

    def create_with_logs(
        self,
        workout: Dict[str, Any],
        log_rows: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Insert a workout and its ExerciseLog rows in one transaction.

        Args:
            workout: Workouts insert payload
            log_rows: ExerciseLog insert payloads (one per performed set)

        Returns:
            The inserted workout row

        Raises:
            WorkoutCreationError: If any insert fails; nothing is persisted
        """
        ...

    def toggle_like(self, workout_id: WorkoutId, user_id: str) -> LikeToggleResult:
        """
        Atomically flip the like membership of (workout_id, user_id).

        Removes the like if present, adds it otherwise, and writes the new
        membership count to `likes_count` before releasing the workout.

        Returns:
            LikeToggleResult with the new count and whether the user now likes it

        Raises:
            NotFound: If the workout does not exist
            LikeConflict: If the membership insert hit the unique constraint
            UpstreamFailure: On any other store error
        """
        ...
