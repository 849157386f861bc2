import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from awsfault.api.error_handlers import register_exception_handlers
from awsfault.core.config import Settings, settings
from awsfault.main import app as main_app, create_app
from awsfault.services.error_translator import wrap

from .conftest import build_failure


def _app_raising(err) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/fail")
    def fail():
        raise err

    return app


def test_health():
    client = TestClient(main_app)
    assert client.get("/health").json() == {"ok": True}


def test_client_error_keeps_upstream_status(access_denied):
    client = TestClient(_app_raising(wrap(access_denied)))

    resp = client.get("/fail")

    assert resp.status_code == 403
    assert resp.json() == {
        "message": "s3 Error: Access Denied",
        "service": "s3",
        "code": "AccessDenied",
        "type": "client",
        "request_id": "abc-123",
    }


@pytest.mark.parametrize(
    "aws_error, response",
    [
        (None, None),
        ({"code": "InternalError", "type": "server"}, {"ResponseMetadata": {"HTTPStatusCode": 500}}),
    ],
)
def test_other_failures_are_bad_gateway(dynamodb_client, aws_error, response):
    err = wrap(build_failure(client=dynamodb_client, message="connection timed out", aws_error=aws_error, response=response))
    client = TestClient(_app_raising(err))

    resp = client.get("/fail")

    assert resp.status_code == 502
    assert resp.json()["service"] == "dynamodb"


def test_cors_disabled_by_default():
    client = TestClient(main_app)

    resp = client.get("/health", headers={"Origin": "http://evil.example"})

    assert resp.status_code == 200
    assert "access-control-allow-origin" not in resp.headers


def test_cors_allows_configured_origins_only(monkeypatch):
    monkeypatch.setattr(settings, "cors_origins", ["http://localhost:3000"])
    client = TestClient(create_app())

    allowed = client.get("/health", headers={"Origin": "http://localhost:3000"})
    denied = client.get("/health", headers={"Origin": "http://evil.example"})

    assert allowed.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert "access-control-allow-credentials" not in allowed.headers
    assert "access-control-allow-origin" not in denied.headers


def test_cors_origins_read_as_csv(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, https://console.example ,")

    assert Settings().cors_origins == ["http://localhost:3000", "https://console.example"]
