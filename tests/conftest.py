from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from application import create_app


@pytest.fixture()
def app() -> Flask:
    return create_app(
        {
            "TESTING": True,
            "SECRET_KEY": "test-secret-key",
            "SESSION_COOKIE_SECURE": False,
            "LOGIN_URL": "index.php",
            "LOGOUT_URL": "logout.php",
            "SESSION_FLAG_KEY": "loggedin",
        }
    )


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def logged_in_client(client: FlaskClient) -> FlaskClient:
    with client.session_transaction() as sess:
        sess["loggedin"] = True
    return client
