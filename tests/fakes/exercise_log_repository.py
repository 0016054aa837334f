"""
Fake ExerciseLog Repository for testing.
"""
from typing import Optional, List, Dict, Any, Union
import itertools


class FakeExerciseLogRepository:
    """In-memory fake implementation of ExerciseLogRepository."""

    def __init__(self):
        self._rows: List[Dict[str, Any]] = []
        self._ids = itertools.count(1)

    def reset(self) -> None:
        self._rows.clear()

    def seed(self, rows: List[Dict[str, Any]]) -> None:
        for row in rows:
            self._rows.append({"sets": 1, **row, "id": row.get("id") or next(self._ids)})

    def get_all(self) -> List[Dict[str, Any]]:
        """Get all stored rows (test helper)."""
        return [dict(r) for r in self._rows]

    def _pair(self, user_id: str, exercise_id: Union[int, str]) -> List[Dict[str, Any]]:
        rows = [
            r for r in self._rows
            if r["user_id"] == user_id and str(r["exercise_id"]) == str(exercise_id)
        ]
        rows.sort(key=lambda r: (str(r["date"]), r["id"]), reverse=True)
        return rows

    def add(self, row: Dict[str, Any]) -> Dict[str, Any]:
        stored = {**row, "id": next(self._ids)}
        self._rows.append(stored)
        return dict(stored)

    def get_last(self, user_id: str, exercise_id: Union[int, str]) -> Optional[Dict[str, Any]]:
        rows = self._pair(user_id, exercise_id)
        return dict(rows[0]) if rows else None

    def get_history(
        self,
        user_id: str,
        exercise_id: Union[int, str],
        *,
        limit: int = 50,
    ) -> List[Dict[str, Any]]:
        return [dict(r) for r in self._pair(user_id, exercise_id)[:limit]]

    def get_activity(self, user_id: str) -> List[Dict[str, Any]]:
        return [
            {"date": r["date"], "sets": r.get("sets", 1)}
            for r in self._rows
            if r["user_id"] == user_id
        ]
