"""
Supabase implementation of CommentRepository.
"""
import logging
from typing import List, Dict, Any

from supabase import Client

from application.exceptions import UpstreamFailure
from application.ports.workout_repository import WorkoutId

logger = logging.getLogger(__name__)

COMMENTS_TABLE = "WorkoutComments"


class SupabaseCommentRepository:
    """Append-only workout comments stored in WorkoutComments."""

    def __init__(self, client: Client):
        self._client = client

    def list_for_workout(self, workout_id: WorkoutId) -> List[Dict[str, Any]]:
        try:
            result = (
                self._client.table(COMMENTS_TABLE)
                .select("*")
                .eq("workout_id", workout_id)
                .order("created_at", desc=False)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to list comments for workout {workout_id}: {e}")
            raise UpstreamFailure(str(e)) from e
        return result.data or []

    def add(self, workout_id: WorkoutId, user_id: str, content: str) -> Dict[str, Any]:
        try:
            result = (
                self._client.table(COMMENTS_TABLE)
                .insert({"workout_id": workout_id, "user_id": user_id, "content": content})
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to add comment to workout {workout_id}: {e}")
            raise UpstreamFailure(str(e)) from e

        if not result.data:
            raise UpstreamFailure("Comment insert returned no data")
        return result.data[0]
