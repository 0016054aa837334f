"""
ListVisibleWorkouts Use Case.

Resolves the workout feed for a viewer: every public workout plus the
viewer's own private ones, newest first. Anonymous viewers see public
workouts only.
"""

import re
from typing import List, Optional

from application.exceptions import InvalidArgument
from application.ports import WorkoutRepository
from domain.converters import db_row_to_workout
from domain.models import Workout

# viewer_id ends up inside a PostgREST `or=(...)` filter; only allow
# identifier characters so it cannot add clauses.
VIEWER_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


class ListVisibleWorkoutsUseCase:
    """Use case for the workouts feed."""

    def __init__(self, workout_repo: WorkoutRepository) -> None:
        self._workout_repo = workout_repo

    def execute(self, viewer_id: Optional[str] = None) -> List[Workout]:
        """
        List workouts visible to `viewer_id`.

        Args:
            viewer_id: Users.id of the viewer, or None/blank for anonymous

        Returns:
            Workouts ordered by created_at descending (no pagination)

        Raises:
            InvalidArgument: If viewer_id is not a plain identifier
        """
        viewer = viewer_id.strip() if isinstance(viewer_id, str) else None
        if viewer and not VIEWER_ID_PATTERN.match(viewer):
            raise InvalidArgument("viewer_id is invalid")

        rows = self._workout_repo.list_visible(viewer or None)
        return [db_row_to_workout(row) for row in rows]
