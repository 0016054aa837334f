"""
Unit tests for api/deps.py dependency providers.

These tests verify that the dependency providers are properly wired and
return the correct types. Uses mocks for external dependencies.
"""

import pytest
from fastapi import HTTPException
from unittest.mock import MagicMock, patch

from api import deps
from application.use_cases import (
    AddCommentUseCase,
    SyncAuthUseCase,
    ToggleLikeUseCase,
    UploadAvatarUseCase,
)
from backend.settings import Settings
from infrastructure import (
    NinjasNutritionClient,
    SupabaseAvatarStorage,
    SupabaseWorkoutRepository,
)

# All tests in this module are pure logic tests with mocks - mark as unit
pytestmark = pytest.mark.unit


def _settings(**overrides) -> Settings:
    fields = {
        "environment": "test",
        "supabase_url": None,
        "supabase_service_role_key": None,
        "supabase_anon_key": None,
        "ninjas_api_key": None,
        **overrides,
    }
    return Settings(_env_file=None, **fields)


# =============================================================================
# Supabase client
# =============================================================================


class TestSupabaseClient:

    def test_none_when_not_configured(self):
        assert deps.get_supabase_client(_settings()) is None

    def test_required_raises_503(self):
        with pytest.raises(HTTPException) as exc_info:
            deps.get_supabase_client_required(None)
        assert exc_info.value.status_code == 503

    def test_client_created_once_per_credentials(self):
        settings = _settings(supabase_url="https://proj.supabase.co", supabase_service_role_key="service")
        deps._create_supabase_client.cache_clear()
        try:
            with patch("api.deps.create_client", return_value=MagicMock()) as mock_create:
                first = deps.get_supabase_client(settings)
                second = deps.get_supabase_client(settings)

            mock_create.assert_called_once_with("https://proj.supabase.co", "service")
            assert first is second
        finally:
            deps._create_supabase_client.cache_clear()


# =============================================================================
# Repositories and services
# =============================================================================


class TestProviders:

    def test_workout_repo(self):
        assert isinstance(deps.get_workout_repo(MagicMock()), SupabaseWorkoutRepository)

    def test_avatar_storage_uses_configured_bucket(self):
        client = MagicMock()
        storage = deps.get_avatar_storage(client, _settings(avatar_bucket="pics"))

        assert isinstance(storage, SupabaseAvatarStorage)
        storage._client.storage.from_.return_value.get_public_url.return_value = "u"
        storage.upload("a/avatar.png", b"x", "image/png")
        client.storage.from_.assert_called_with("pics")

    def test_nutrition_none_without_key(self):
        assert deps.get_nutrition_service(_settings()) is None

    def test_nutrition_client_with_key(self):
        assert isinstance(deps.get_nutrition_service(_settings(ninjas_api_key="k")), NinjasNutritionClient)


class TestUseCaseProviders:

    def test_toggle_like(self):
        assert isinstance(deps.get_toggle_like_use_case(MagicMock()), ToggleLikeUseCase)

    def test_add_comment(self):
        assert isinstance(deps.get_add_comment_use_case(MagicMock(), MagicMock()), AddCommentUseCase)

    def test_sync_auth_reads_admin_email(self):
        use_case = deps.get_sync_auth_use_case(_settings(admin_email="boss@fittrack.test"))

        assert isinstance(use_case, SyncAuthUseCase)
        assert use_case.execute("a1", "BOSS@fittrack.test")["role"] == "admin"

    def test_upload_avatar(self):
        use_case = deps.get_upload_avatar_use_case(MagicMock(), MagicMock(), _settings(avatar_max_bytes=10))
        assert isinstance(use_case, UploadAvatarUseCase)
