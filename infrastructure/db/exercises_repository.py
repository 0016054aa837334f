"""
Supabase implementation of ExercisesRepository.

The Exercises table is seeded by scripts/seed_exercises.py and never written
by the API.
"""
import logging
from typing import Optional, List, Dict, Any, Union

from supabase import Client

from application.exceptions import UpstreamFailure
from infrastructure.db.pagination import fetch_all

logger = logging.getLogger(__name__)

EXERCISES_TABLE = "Exercises"


class SupabaseExercisesRepository:
    """
    Supabase implementation of ExercisesRepository protocol.

    Provides:
    - Full catalog listing, optionally filtered by muscle group
    - Lookup by ID
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def list_exercises(self, muscle_group: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List catalog exercises ordered by name.

        Args:
            muscle_group: Optional exact match on muscle_group

        Returns:
            List of exercise dictionaries
        """
        def build_query():
            query = self._client.table(EXERCISES_TABLE).select("*")
            if muscle_group:
                query = query.eq("muscle_group", muscle_group)
            return query.order("name").order("id")

        try:
            return fetch_all(build_query)
        except Exception as e:
            logger.exception("Error fetching exercises")
            raise UpstreamFailure(str(e)) from e

    def get(self, exercise_id: Union[int, str]) -> Optional[Dict[str, Any]]:
        """
        Get an exercise by its ID.

        Returns:
            Exercise dictionary or None if not found
        """
        try:
            result = (
                self._client.table(EXERCISES_TABLE)
                .select("*")
                .eq("id", exercise_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.exception(f"Error fetching exercise by id {exercise_id}")
            raise UpstreamFailure(str(e)) from e

        return result.data[0] if result.data else None
