"""
Supabase implementation of WorkoutRepository.

Plain reads go through PostgREST table queries. The like toggle and the
workout + ExerciseLog dual write go through the Postgres functions defined in
supabase/migrations, which run each operation in a single transaction.
"""
import json
import logging
from typing import Optional, List, Dict, Any

from postgrest.exceptions import APIError
from supabase import Client

from application.exceptions import (
    LikeConflict,
    NotFound,
    UpstreamFailure,
    WorkoutCreationError,
)
from application.ports.workout_repository import LikeToggleResult, WorkoutId
from infrastructure.db.pagination import fetch_all

logger = logging.getLogger(__name__)

WORKOUTS_TABLE = "Workouts"

# SQLSTATE codes surfaced by PostgREST
NO_DATA_FOUND = "P0002"
UNIQUE_VIOLATION = "23505"


class SupabaseWorkoutRepository:
    """
    Supabase implementation of WorkoutRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get(self, workout_id: WorkoutId) -> Optional[Dict[str, Any]]:
        """Get a single workout by ID."""
        try:
            result = (
                self._client.table(WORKOUTS_TABLE)
                .select("*")
                .eq("id", workout_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to get workout {workout_id}: {e}")
            raise UpstreamFailure(str(e)) from e
        return result.data[0] if result.data else None

    def list_visible(self, viewer_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List public workouts plus the viewer's own, newest first.

        viewer_id is interpolated into a PostgREST `or` filter and must
        already be validated by the caller.
        """
        def build_query():
            query = self._client.table(WORKOUTS_TABLE).select("*")
            if viewer_id:
                query = query.or_(f"is_public.eq.true,user_id.eq.{viewer_id}")
            else:
                query = query.eq("is_public", True)
            return query.order("created_at", desc=True).order("id", desc=True)

        try:
            return fetch_all(build_query)
        except Exception as e:
            logger.error(f"Failed to list workouts for viewer {viewer_id}: {e}")
            raise UpstreamFailure(str(e)) from e

    def create_with_logs(
        self,
        workout: Dict[str, Any],
        log_rows: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Create a workout and its ExerciseLog rows atomically.

        Uses the `create_workout_with_logs` stored procedure so both inserts
        commit or roll back together.

        Raises:
            WorkoutCreationError: If the RPC call fails
        """
        try:
            response = self._client.rpc(
                "create_workout_with_logs",
                {
                    "p_workout": json.dumps(workout),
                    "p_logs": json.dumps(log_rows),
                },
            ).execute()

            if not response.data:
                raise WorkoutCreationError("RPC returned no data")

            data = response.data
            return data[0] if isinstance(data, list) else data
        except Exception as e:
            if isinstance(e, WorkoutCreationError):
                raise
            logger.error(f"Atomic workout creation failed for user {workout.get('user_id')}: {e}")
            raise WorkoutCreationError(f"Atomic workout creation failed: {e}") from e

    def toggle_like(self, workout_id: WorkoutId, user_id: str) -> LikeToggleResult:
        """
        Flip the like membership via the `toggle_workout_like` function.

        The function locks the workout row, flips the membership and writes
        the recounted likes_count before commit. A concurrent duplicate
        membership insert surfaces as 23505 and is raised as LikeConflict.
        """
        try:
            response = self._client.rpc(
                "toggle_workout_like",
                {"p_workout_id": workout_id, "p_user_id": user_id},
            ).execute()
        except APIError as e:
            if e.code == NO_DATA_FOUND:
                raise NotFound(f"Workout {workout_id} not found") from e
            if e.code == UNIQUE_VIOLATION:
                raise LikeConflict(f"Like already exists for workout {workout_id}") from e
            logger.error(f"Like toggle failed for workout {workout_id}: {e.message}")
            raise UpstreamFailure(e.message or str(e)) from e
        except Exception as e:
            logger.error(f"Like toggle failed for workout {workout_id}: {e}")
            raise UpstreamFailure(str(e)) from e

        data = response.data
        if isinstance(data, list):
            data = data[0] if data else None
        if not data:
            raise NotFound(f"Workout {workout_id} not found")

        return LikeToggleResult(
            id=data["id"],
            likes_count=max(int(data.get("likes_count") or 0), 0),
            liked=bool(data["liked"]),
        )
