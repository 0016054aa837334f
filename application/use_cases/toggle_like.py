"""
ToggleLike Use Case.

Flips whether a user likes a workout and returns the new denormalized
counter. The read-check-write sequence runs inside the repository as one
transaction (row lock on the workout), so concurrent toggles on the same
workout serialize and `likes_count` always equals the number of like rows.
"""

import logging

from application.exceptions import InvalidArgument, LikeConflict
from application.ports import LikeToggleResult, WorkoutId, WorkoutRepository

logger = logging.getLogger(__name__)

# A conflicting insert means the like already exists; one re-run resolves it.
MAX_CONFLICT_RETRIES = 1


class ToggleLikeUseCase:
    """
    Use case for the like/unlike toggle.

    This is a toggle, not an idempotent "like": calling it twice in a row for
    the same user returns liked=True then liked=False and leaves the counter
    where it started.

    Usage:
        >>> use_case = ToggleLikeUseCase(workout_repo=workout_repo)
        >>> result = use_case.execute(workout_id=42, user_id="user-123")
        >>> result.liked, result.likes_count
        (True, 1)
    """

    def __init__(self, workout_repo: WorkoutRepository) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository owning workouts and like membership
        """
        self._workout_repo = workout_repo

    def execute(self, workout_id: WorkoutId, user_id: str) -> LikeToggleResult:
        """
        Toggle the like of `user_id` on `workout_id`.

        Args:
            workout_id: Workouts.id
            user_id: Users.id of the caller

        Returns:
            LikeToggleResult with {id, likes_count, liked}

        Raises:
            InvalidArgument: If user_id is missing
            NotFound: If the workout does not exist
            UpstreamFailure: If the store fails
        """
        if user_id is None or not str(user_id).strip():
            raise InvalidArgument("user_id is required")
        user_id = str(user_id).strip()

        attempts = 0
        while True:
            try:
                result = self._workout_repo.toggle_like(workout_id, user_id)
            except LikeConflict:
                if attempts >= MAX_CONFLICT_RETRIES:
                    raise
                attempts += 1
                logger.warning(
                    f"Like insert conflict for workout {workout_id} / user {user_id}, retrying toggle"
                )
                continue

            logger.info(
                f"Workout {workout_id} {'liked' if result.liked else 'unliked'} by {user_id} "
                f"(likes_count={result.likes_count})"
            )
            return result
