"""
Shared pytest fixtures.

Router tests run against a fresh app built by create_app() with test
settings; every repository, storage and external client is replaced with
an in-memory fake.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from api import deps
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import (
    FakeAvatarStorage,
    FakeCommentRepository,
    FakeExerciseLogRepository,
    FakeExercisesRepository,
    FakeNutritionService,
    FakeUserRepository,
    FakeWorkoutRepository,
)
from tests.fakes.conftest import override_dependency

FIXED_TODAY = date(2024, 3, 15)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        admin_email="Admin@FitTrack.test",
        ninjas_api_key="test-key",
        _env_file=None,
    )


@pytest.fixture
def app(settings):
    return create_app(settings=settings)


@pytest.fixture
def workout_repo(app) -> FakeWorkoutRepository:
    return override_dependency(app, deps.get_workout_repo, FakeWorkoutRepository())


@pytest.fixture
def comment_repo(app) -> FakeCommentRepository:
    return override_dependency(app, deps.get_comment_repo, FakeCommentRepository())


@pytest.fixture
def exercises_repo(app) -> FakeExercisesRepository:
    return override_dependency(app, deps.get_exercises_repo, FakeExercisesRepository())


@pytest.fixture
def log_repo(app) -> FakeExerciseLogRepository:
    return override_dependency(app, deps.get_exercise_log_repo, FakeExerciseLogRepository())


@pytest.fixture
def user_repo(app) -> FakeUserRepository:
    return override_dependency(app, deps.get_user_repo, FakeUserRepository())


@pytest.fixture
def avatar_storage(app) -> FakeAvatarStorage:
    return override_dependency(app, deps.get_avatar_storage, FakeAvatarStorage())


@pytest.fixture
def nutrition(app) -> FakeNutritionService:
    return override_dependency(app, deps.get_nutrition_service, FakeNutritionService())


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
