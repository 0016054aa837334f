"""
Unit tests for backend/main.py
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import patch

from application.exceptions import InvalidArgument
from backend.main import create_app, _init_sentry, _configure_cors, _log_configuration
from backend.settings import Settings


def _mounted_paths(app):
    # Included routers may be listed without a path of their own.
    paths = {getattr(route, "path", None) for route in app.routes}
    paths.update(app.openapi()["paths"])
    return paths


@pytest.mark.unit
class TestCreateApp:

    def test_create_app_returns_fastapi_instance(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))
        assert isinstance(app, FastAPI)

    def test_create_app_uses_default_settings_when_none_provided(self):
        with patch("backend.main.get_settings") as mock_get_settings:
            mock_get_settings.return_value = Settings(environment="test", _env_file=None)

            app = create_app(settings=None)

            mock_get_settings.assert_called_once()
            assert isinstance(app, FastAPI)

    def test_create_app_configures_app_metadata(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))

        assert app.title == "FitTrack Pro API"
        assert app.version == "1.0.0"

    def test_routes_mounted_under_prefix(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))
        paths = _mounted_paths(app)

        for path in [
            "/api/health",
            "/api/auth/sync",
            "/api/profile/ensure",
            "/api/profile/update",
            "/api/profile/avatar",
            "/api/exercises",
            "/api/logs",
            "/api/logs/streak",
            "/api/foodinfo",
            "/api/workouts",
            "/api/workouts/{workout_id}/like",
            "/api/workouts/{workout_id}/comments",
        ]:
            assert path in paths

    def test_custom_prefix(self):
        app = create_app(settings=Settings(environment="test", api_prefix="v2", _env_file=None))
        assert "/v2/health" in _mounted_paths(app)


@pytest.mark.unit
class TestInitSentry:

    def test_init_sentry_skipped_when_no_dsn(self):
        settings = Settings(sentry_dsn=None, _env_file=None)

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_not_called()

    def test_init_sentry_called_when_dsn_provided(self):
        settings = Settings(
            sentry_dsn="https://test@sentry.io/123",
            environment="test",
            _env_file=None
        )

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_called_once_with(
                dsn="https://test@sentry.io/123",
                environment="test",
                traces_sample_rate=0.1,
                profiles_sample_rate=0.1,
            )


@pytest.mark.unit
class TestConfigureCors:

    def test_configure_cors_adds_middleware(self):
        app = FastAPI()
        initial_middleware_count = len(app.user_middleware)

        _configure_cors(app, Settings(_env_file=None))

        assert len(app.user_middleware) == initial_middleware_count + 1


@pytest.mark.unit
class TestLogConfiguration:

    def test_warns_when_integrations_missing(self, caplog):
        settings = Settings(
            supabase_url=None,
            supabase_service_role_key=None,
            supabase_anon_key=None,
            ninjas_api_key=None,
            _env_file=None,
        )

        with caplog.at_level("WARNING"):
            _log_configuration(settings)

        assert "Supabase credentials not configured" in caplog.text
        assert "NINJAS_API_KEY not set" in caplog.text

    def test_quiet_when_configured(self, caplog):
        settings = Settings(
            supabase_url="https://proj.supabase.co",
            supabase_service_role_key="service",
            ninjas_api_key="ninja",
            admin_email="admin@fittrack.test",
            _env_file=None,
        )

        with caplog.at_level("WARNING"):
            _log_configuration(settings)

        assert caplog.text == ""


@pytest.mark.integration
class TestAppIntegration:

    def test_cors_allows_dev_origin(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))
        client = TestClient(app)

        response = client.get("/api/health", headers={"Origin": "http://localhost:5173"})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"

    def test_unknown_route_uses_error_shape(self):
        client = TestClient(create_app(settings=Settings(environment="test", _env_file=None)))

        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_unhandled_exception_is_generic_500(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))

        @app.get("/boom")
        def boom():
            raise RuntimeError("secret detail")

        response = TestClient(app, raise_server_exceptions=False).get("/boom")

        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}

    def test_domain_error_uses_its_status(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))

        @app.get("/bad")
        def bad():
            raise InvalidArgument("user_id is required")

        response = TestClient(app).get("/bad")

        assert response.status_code == 400
        assert response.json() == {"error": "user_id is required"}


@pytest.mark.unit
class TestMultipleAppInstances:

    def test_create_multiple_independent_apps(self):
        app1 = create_app(settings=Settings(environment="test", _env_file=None))
        app2 = create_app(settings=Settings(environment="production", _env_file=None))

        assert app1 is not app2
