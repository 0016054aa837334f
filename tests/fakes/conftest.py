"""
Test Fixtures and Helpers for Fake Repositories.

This module provides helper functions for overriding FastAPI dependencies
with fake repository implementations on a given app instance.

Usage:
    from tests.fakes.conftest import override_dependency

    def test_something(app):
        repo = FakeWorkoutRepository()
        override_dependency(app, get_workout_repo, repo)
"""

from typing import Any, Callable

from fastapi import FastAPI

# Type for repository dependency getters
RepoGetter = Callable[..., Any]


def override_dependency(
    app: FastAPI,
    getter: RepoGetter,
    implementation: Any,
) -> Any:
    """
    Override a FastAPI dependency with a fake implementation.

    Args:
        app: Application whose dependency_overrides are updated
        getter: The dependency getter function (e.g., get_workout_repo)
        implementation: The fake implementation instance

    Returns:
        The implementation (for seeding data etc.)
    """
    app.dependency_overrides[getter] = lambda: implementation
    return implementation
