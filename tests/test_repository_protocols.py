"""
Tests for the port definitions.

These tests verify that:
1. Every port is importable from application.ports
2. Supabase adapters and in-memory fakes define every port method
3. Method signatures take the same parameters as the port
"""
import inspect

import pytest

from application.ports import (
    AvatarStorage,
    CommentRepository,
    ExerciseLogRepository,
    ExercisesRepository,
    NutritionService,
    UserRepository,
    WorkoutRepository,
)
from infrastructure import (
    NinjasNutritionClient,
    SupabaseAvatarStorage,
    SupabaseCommentRepository,
    SupabaseExerciseLogRepository,
    SupabaseExercisesRepository,
    SupabaseUserRepository,
    SupabaseWorkoutRepository,
)
from tests.fakes import (
    FakeAvatarStorage,
    FakeCommentRepository,
    FakeExerciseLogRepository,
    FakeExercisesRepository,
    FakeNutritionService,
    FakeUserRepository,
    FakeWorkoutRepository,
)

# All tests in this module are pure logic tests (no TestClient) - mark as unit
pytestmark = pytest.mark.unit

IMPLEMENTATIONS = [
    (WorkoutRepository, SupabaseWorkoutRepository, FakeWorkoutRepository),
    (CommentRepository, SupabaseCommentRepository, FakeCommentRepository),
    (ExercisesRepository, SupabaseExercisesRepository, FakeExercisesRepository),
    (ExerciseLogRepository, SupabaseExerciseLogRepository, FakeExerciseLogRepository),
    (UserRepository, SupabaseUserRepository, FakeUserRepository),
    (AvatarStorage, SupabaseAvatarStorage, FakeAvatarStorage),
    (NutritionService, NinjasNutritionClient, FakeNutritionService),
]


def _port_methods(protocol):
    return [
        name for name, member in vars(protocol).items()
        if callable(member) and not name.startswith("_")
    ]


def _params(func):
    return [p for p in inspect.signature(func).parameters if p != "self"]


@pytest.mark.parametrize("protocol,adapter,fake", IMPLEMENTATIONS, ids=lambda v: getattr(v, "__name__", v))
def test_implementations_define_port_methods(protocol, adapter, fake):
    methods = _port_methods(protocol)
    assert methods, f"{protocol.__name__} defines no methods"

    for name in methods:
        expected = _params(getattr(protocol, name))
        for implementation in (adapter, fake):
            assert hasattr(implementation, name), f"{implementation.__name__} lacks {name}"
            assert _params(getattr(implementation, name)) == expected, (
                f"{implementation.__name__}.{name} signature differs from {protocol.__name__}"
            )


def test_nutrition_lookup_is_async():
    assert inspect.iscoroutinefunction(NinjasNutritionClient.lookup)
    assert inspect.iscoroutinefunction(FakeNutritionService.lookup)
