# =============================================================================
# tests/test_todo.py - Todo API Tests
# =============================================================================
# Tests for the configuration-aware example: the status route, the
# request logger and startup behaviour with missing settings.
# =============================================================================

import logging
from unittest.mock import ANY, patch

import pytest
from fastapi.testclient import TestClient

from app import todo
from app.config import Settings, get_settings
from app.factory import create_app


# =============================================================================
# Status Endpoint
# =============================================================================

class TestStatusEndpoint:
    """Test GET /."""

    def test_reports_environment(self, todo_client):
        response = todo_client.get("/")

        assert response.status_code == 200
        assert response.text == f"Todo API running in {get_settings().APP_ENV} mode"

    def test_reports_overridden_environment(self, todo_app):
        todo_app.dependency_overrides[get_settings] = lambda: Settings(
            APP_ENV="staging", DB_URI="sqlite://", _env_file=None
        )

        with TestClient(todo_app) as client:
            response = client.get("/")

        assert response.text == "Todo API running in staging mode"


# =============================================================================
# Request Logging
# =============================================================================

class TestRequestLogging:
    """Test the request logger middleware."""

    def test_logs_each_request(self, todo_client, caplog):
        with caplog.at_level(logging.INFO, logger="app.middleware"):
            todo_client.get("/?verbose=1")
            todo_client.get("/missing")

        messages = [r.getMessage() for r in caplog.records if r.name == "app.middleware"]
        assert messages[0].startswith("GET /?verbose=1 200 ")
        assert messages[1].startswith("GET /missing 404 ")

    def test_logs_failed_request(self, caplog):
        app = create_app(title="T", request_logging=True)

        @app.get("/boom")
        async def boom():
            raise RuntimeError("boom")

        client = TestClient(app, raise_server_exceptions=False)
        with caplog.at_level(logging.INFO, logger="app.middleware"):
            response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"message": "internal server error"}

        errors = [
            r for r in caplog.records
            if r.name == "app.middleware" and r.levelno == logging.ERROR
        ]
        assert len(errors) == 1
        assert errors[0].getMessage().startswith("Request failed: GET /boom")

    def test_plain_examples_do_not_log_requests(self, simple_client, caplog):
        with caplog.at_level(logging.INFO, logger="app.middleware"):
            simple_client.get("/")

        assert not [r for r in caplog.records if r.name == "app.middleware"]

    def test_logs_startup_environment(self, todo_app, caplog):
        with caplog.at_level(logging.INFO, logger="app.todo"):
            with TestClient(todo_app):
                pass

        assert f"Starting Todo API in {get_settings().APP_ENV} mode" in caplog.text


# =============================================================================
# Entry Point
# =============================================================================

class TestMain:
    """Test startup of the todo app."""

    def test_serves_on_configured_port(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "production")
        monkeypatch.setenv("PORT", "9090")

        with patch("app.todo.serve") as serve, patch("app.todo.configure_logging"):
            assert todo.main() == 0

        serve.assert_called_once_with(ANY, "0.0.0.0", 9090)

    def test_missing_db_uri_exits_before_listening(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("DB_URI")

        with patch("app.todo.serve") as serve, patch("app.todo.configure_logging"):
            with pytest.raises(SystemExit) as exc_info:
                todo.main()

        assert exc_info.value.code == 1
        serve.assert_not_called()
