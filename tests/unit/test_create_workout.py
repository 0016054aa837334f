"""
Unit tests for CreateWorkoutUseCase.

Tests for:
- Filtering of incomplete sets and empty blocks
- Rejection with no writes
- One ExerciseLog row per set, dated with the caller's day
- Atomic failure leaves nothing behind
"""

from datetime import date

import pytest

from application.exceptions import InvalidArgument, WorkoutCreationError
from application.use_cases import CreateWorkoutUseCase
from domain.models import Workout, WorkoutDocument
from tests.fakes import FakeWorkoutRepository, sample_blocks

pytestmark = pytest.mark.unit

TODAY = date(2024, 3, 15)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def workout_repo() -> FakeWorkoutRepository:
    return FakeWorkoutRepository()


@pytest.fixture
def use_case(workout_repo: FakeWorkoutRepository) -> CreateWorkoutUseCase:
    return CreateWorkoutUseCase(workout_repo=workout_repo, today=lambda: TODAY)


# =============================================================================
# Filtering
# =============================================================================


class TestCompositionFiltering:

    def test_incomplete_sets_and_empty_blocks_dropped(self, use_case, workout_repo):
        workout = use_case.execute(
            owner_id="u1",
            name="Chest",
            exercises=[
                {"exercise_id": 1, "sets": [
                    {"reps": 10, "weight": 50, "unit": "kg"},
                    {"reps": "", "weight": "", "unit": "kg"},
                ]},
                {"exercise_id": 2, "sets": []},
            ],
            is_public=True,
        )

        assert isinstance(workout, Workout)
        assert workout.data == {
            "exercises": [
                {"exercise_id": 1, "sets": [{"reps": 10, "weight": 50.0, "unit": "kg"}]},
            ]
        }
        assert len(workout_repo.get_logs()) == 1

    def test_blocks_without_exercise_id_dropped(self, use_case):
        workout = use_case.execute(
            owner_id="u1",
            name="Legs",
            exercises=[
                {"exercise_id": None, "sets": [{"reps": 5, "weight": 100}]},
                {"exercise_id": 3, "sets": [{"reps": 5, "weight": 100}]},
            ],
        )
        assert [b["exercise_id"] for b in workout.data["exercises"]] == [3]

    def test_string_inputs_are_coerced(self, use_case, workout_repo):
        workout = use_case.execute(
            owner_id="u1",
            name="Form input",
            exercises=[{"exercise_id": "4", "sets": [{"reps": "8", "weight": "62.5", "unit": "lb"}]}],
        )

        block = WorkoutDocument.model_validate(workout.data).exercises[0]
        assert block.exercise_id == 4
        assert block.sets[0].reps == 8
        assert block.sets[0].weight == 62.5
        assert block.sets[0].unit == "lb"
        assert workout_repo.get_logs()[0]["exercise_id"] == 4

    def test_units_are_kept_per_set(self, use_case):
        workout = use_case.execute(
            owner_id="u1",
            name="Mixed",
            exercises=[{"exercise_id": 1, "sets": [
                {"reps": 5, "weight": 100, "unit": "kg"},
                {"reps": 5, "weight": 225, "unit": "lb"},
            ]}],
        )
        units = [s.unit for s in WorkoutDocument.model_validate(workout.data).exercises[0].sets]
        assert units == ["kg", "lb"]
        assert [s.weight for s in WorkoutDocument.model_validate(workout.data).exercises[0].sets] == [100.0, 225.0]

    def test_name_is_trimmed_and_counter_starts_at_zero(self, use_case):
        workout = use_case.execute(owner_id="u1", name="  Pull  ", exercises=sample_blocks(1, 1))
        assert workout.name == "Pull"
        assert workout.likes_count == 0
        assert workout.is_public is False


# =============================================================================
# Rejection
# =============================================================================


class TestCompositionRejection:

    @pytest.mark.parametrize(
        "owner_id,name,exercises",
        [
            (None, "Legs", [{"exercise_id": 1, "sets": [{"reps": 1, "weight": 1}]}]),
            ("u1", "   ", [{"exercise_id": 1, "sets": [{"reps": 1, "weight": 1}]}]),
            ("u1", "Legs", []),
            ("u1", "Legs", None),
            ("u1", "Legs", "not-a-list"),
        ],
    )
    def test_missing_fields(self, use_case, workout_repo, owner_id, name, exercises):
        with pytest.raises(InvalidArgument, match="user_id, name and exercises are required"):
            use_case.execute(owner_id=owner_id, name=name, exercises=exercises)
        assert workout_repo.get_all() == []
        assert workout_repo.get_logs() == []

    def test_everything_filtered_out(self, use_case, workout_repo):
        with pytest.raises(InvalidArgument, match="Add at least one exercise with one set"):
            use_case.execute(
                owner_id="u1",
                name="Empty",
                exercises=[
                    {"exercise_id": 1, "sets": [{"reps": "", "weight": 20}]},
                    {"exercise_id": 2, "sets": []},
                    {"sets": [{"reps": 5, "weight": 5}]},
                ],
            )
        assert workout_repo.get_all() == []
        assert workout_repo.get_logs() == []

    @pytest.mark.parametrize(
        "bad_set,message",
        [
            ({"reps": "ten", "weight": 20}, "reps must be a number"),
            ({"reps": 0, "weight": 20}, "reps must be a positive whole number"),
            ({"reps": 2.5, "weight": 20}, "reps must be a positive whole number"),
            ({"reps": 5, "weight": -1}, "weight must not be negative"),
        ],
    )
    def test_unsalvageable_values(self, use_case, workout_repo, bad_set, message):
        with pytest.raises(InvalidArgument, match=message):
            use_case.execute(owner_id="u1", name="Bad", exercises=[{"exercise_id": 1, "sets": [bad_set]}])
        assert workout_repo.get_all() == []

    def test_name_too_long(self, use_case):
        with pytest.raises(InvalidArgument, match="name must be at most"):
            use_case.execute(owner_id="u1", name="x" * 121, exercises=sample_blocks(1, 1))


# =============================================================================
# Dual write
# =============================================================================


class TestDualWrite:

    def test_two_exercises_three_sets_yield_six_logs_dated_today(self, use_case, workout_repo):
        use_case.execute(owner_id="u1", name="Full body", exercises=sample_blocks(2, 3))

        logs = workout_repo.get_logs()
        assert len(logs) == 6
        assert all(log["user_id"] == "u1" for log in logs)
        assert all(log["date"] == TODAY.isoformat() for log in logs)
        assert all(log["sets"] == 1 for log in logs)
        assert [log["exercise_id"] for log in logs] == [1, 1, 1, 2, 2, 2]

    def test_caller_date_overrides_server_day(self, use_case, workout_repo):
        use_case.execute(
            owner_id="u1",
            name="Late night",
            exercises=sample_blocks(1, 2),
            log_date=date(2024, 3, 14),
        )
        assert {log["date"] for log in workout_repo.get_logs()} == {"2024-03-14"}

    def test_log_rows_match_document_sets(self, use_case, workout_repo):
        workout = use_case.execute(owner_id="u1", name="Check", exercises=sample_blocks(2, 2))

        expected = [
            (block.exercise_id, s.reps, s.weight)
            for block, s in WorkoutDocument.model_validate(workout.data).iter_sets()
        ]
        actual = [(log["exercise_id"], log["reps"], log["weight"]) for log in workout_repo.get_logs()]
        assert actual == expected

    def test_atomic_failure_persists_nothing(self, use_case, workout_repo):
        workout_repo.simulate_atomic_failure()

        with pytest.raises(WorkoutCreationError):
            use_case.execute(owner_id="u1", name="Doomed", exercises=sample_blocks(2, 3))

        assert workout_repo.get_all() == []
        assert workout_repo.get_logs() == []
