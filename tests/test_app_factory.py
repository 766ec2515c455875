from __future__ import annotations

from flask.testing import FlaskClient

from application import create_app
from services.session_service import SessionService


def test_health_check(client: FlaskClient) -> None:
    r = client.get("/health_check")
    assert r.status_code == 200
    assert b"Alive and Healthy" in r.data


def test_defaults_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("LOGIN_URL", "/")
    monkeypatch.setenv("LOGOUT_URL", "/logout")
    monkeypatch.setenv("SESSION_FLAG_KEY", "authenticated")

    app = create_app()

    assert app.config["LOGIN_URL"] == "/"
    assert app.config["LOGOUT_URL"] == "/logout"
    assert app.config["SESSION_REFRESH_EACH_REQUEST"] is False
    service = app.extensions["session_service"]
    assert isinstance(service, SessionService)
    assert service.flag_key == "authenticated"


def test_builtin_defaults(monkeypatch) -> None:
    for name in ("LOGIN_URL", "LOGOUT_URL", "SESSION_FLAG_KEY"):
        monkeypatch.delenv(name, raising=False)

    app = create_app()

    assert app.config["LOGIN_URL"] == "index.php"
    assert app.config["LOGOUT_URL"] == "logout.php"
    assert app.extensions["session_service"].flag_key == "loggedin"


def test_stylesheet_is_served(client: FlaskClient) -> None:
    r = client.get("/static/style.css")
    assert r.status_code == 200
    assert b".welcome-container" in r.data
    r.close()
