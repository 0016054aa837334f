"""
Workout comment use cases.

Comments are append-only and listed oldest first. There is no edit or
delete operation.
"""

import logging
from typing import Any, Dict, List, Optional

from application.exceptions import InvalidArgument, NotFound
from application.ports import CommentRepository, WorkoutId, WorkoutRepository

logger = logging.getLogger(__name__)

MAX_COMMENT_LENGTH = 2000


class ListCommentsUseCase:
    """Use case for reading the comment thread of a workout."""

    def __init__(self, comment_repo: CommentRepository) -> None:
        self._comment_repo = comment_repo

    def execute(self, workout_id: WorkoutId) -> List[Dict[str, Any]]:
        """Return comments on `workout_id` ordered by created_at ascending."""
        return self._comment_repo.list_for_workout(workout_id)


class AddCommentUseCase:
    """
    Use case for posting a comment.

    Usage:
        >>> use_case = AddCommentUseCase(comment_repo=comments, workout_repo=workouts)
        >>> use_case.execute(workout_id=42, user_id="user-123", content="  nice!  ")["content"]
        'nice!'
    """

    def __init__(
        self,
        comment_repo: CommentRepository,
        workout_repo: WorkoutRepository,
    ) -> None:
        self._comment_repo = comment_repo
        self._workout_repo = workout_repo

    def execute(
        self,
        workout_id: WorkoutId,
        user_id: Optional[str],
        content: Optional[str],
    ) -> Dict[str, Any]:
        """
        Append a trimmed comment to a workout.

        Raises:
            InvalidArgument: If user_id is missing or content is blank/too long
            NotFound: If the workout does not exist
        """
        text = content.strip() if isinstance(content, str) else ""
        if user_id is None or not str(user_id).strip() or not text:
            raise InvalidArgument("user_id and content are required")
        if len(text) > MAX_COMMENT_LENGTH:
            raise InvalidArgument(f"content must be at most {MAX_COMMENT_LENGTH} characters")

        if self._workout_repo.get(workout_id) is None:
            raise NotFound(f"Workout {workout_id} not found")

        comment = self._comment_repo.add(workout_id, str(user_id).strip(), text)
        logger.info(f"Comment {comment.get('id')} added to workout {workout_id} by {user_id}")
        return comment
