"""
Supabase implementation of ExerciseLogRepository.
"""
import logging
from typing import Optional, List, Dict, Any, Union

from supabase import Client

from application.exceptions import UpstreamFailure
from infrastructure.db.pagination import fetch_all

logger = logging.getLogger(__name__)

LOG_TABLE = "ExerciseLog"


class SupabaseExerciseLogRepository:
    """Flat per-set exercise history in the ExerciseLog table."""

    def __init__(self, client: Client):
        self._client = client

    def add(self, row: Dict[str, Any]) -> Dict[str, Any]:
        try:
            result = self._client.table(LOG_TABLE).insert(row).execute()
        except Exception as e:
            logger.error(f"Failed to add exercise log for user {row.get('user_id')}: {e}")
            raise UpstreamFailure(str(e)) from e

        if not result.data:
            raise UpstreamFailure("Exercise log insert returned no data")
        return result.data[0]

    def get_last(self, user_id: str, exercise_id: Union[int, str]) -> Optional[Dict[str, Any]]:
        rows = self.get_history(user_id, exercise_id, limit=1)
        return rows[0] if rows else None

    def get_history(
        self,
        user_id: str,
        exercise_id: Union[int, str],
        *,
        limit: int = 50,
    ) -> List[Dict[str, Any]]:
        try:
            result = (
                self._client.table(LOG_TABLE)
                .select("*")
                .eq("user_id", user_id)
                .eq("exercise_id", exercise_id)
                .order("date", desc=True)
                .order("id", desc=True)
                .limit(limit)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to fetch log history for user {user_id}, exercise {exercise_id}: {e}")
            raise UpstreamFailure(str(e)) from e
        return result.data or []

    def get_activity(self, user_id: str) -> List[Dict[str, Any]]:
        """Every `{date, sets}` row for the user, read in pages."""
        try:
            return fetch_all(
                lambda: self._client.table(LOG_TABLE)
                .select("date, sets")
                .eq("user_id", user_id)
                .order("date", desc=True)
                .order("id", desc=True)
            )
        except Exception as e:
            logger.error(f"Failed to fetch activity for user {user_id}: {e}")
            raise UpstreamFailure(str(e)) from e

