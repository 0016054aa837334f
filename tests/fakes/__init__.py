"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of the application
ports for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Failure injection for the atomic operations
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutRepository, create_feed_repo

    # Direct instantiation
    repo = FakeWorkoutRepository()
    repo.seed([{"id": 1, "user_id": "u1", "name": "Legs", "is_public": True}])

    # Factory function with the three-workout visibility fixture
    repo = create_feed_repo()
"""
from typing import List

# Import all fake implementations
from tests.fakes.workout_repository import FakeWorkoutRepository
from tests.fakes.comment_repository import FakeCommentRepository
from tests.fakes.exercises_repository import FakeExercisesRepository
from tests.fakes.exercise_log_repository import FakeExerciseLogRepository
from tests.fakes.user_repository import FakeUserRepository, FakeAvatarStorage
from tests.fakes.nutrition_service import FakeNutritionService


# =============================================================================
# Factory Functions
# =============================================================================


def create_feed_repo(
    *,
    owner_a: str = "user-1",
    owner_b: str = "user-2",
) -> FakeWorkoutRepository:
    """
    Create a FakeWorkoutRepository holding three workouts:

    - A: public, owned by owner_a (oldest)
    - B: private, owned by owner_a
    - C: private, owned by owner_b (newest)
    """
    repo = FakeWorkoutRepository()
    repo.seed([
        {"id": 1, "user_id": owner_a, "name": "A", "is_public": True},
        {"id": 2, "user_id": owner_a, "name": "B", "is_public": False},
        {"id": 3, "user_id": owner_b, "name": "C", "is_public": False},
    ])
    return repo


def sample_blocks(num_exercises: int = 2, sets_per_exercise: int = 3) -> List[dict]:
    """Submitted exercise blocks with only valid sets."""
    return [
        {
            "exercise_id": exercise_id,
            "sets": [
                {"reps": 10 - i, "weight": 40 + 5 * i, "unit": "kg"}
                for i in range(sets_per_exercise)
            ],
        }
        for exercise_id in range(1, num_exercises + 1)
    ]


__all__ = [
    # Fake implementations
    "FakeWorkoutRepository",
    "FakeCommentRepository",
    "FakeExercisesRepository",
    "FakeExerciseLogRepository",
    "FakeUserRepository",
    "FakeAvatarStorage",
    "FakeNutritionService",
    # Factory functions
    "create_feed_repo",
    "sample_blocks",
]
