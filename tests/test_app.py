"""App-level behaviour: error pages, health check, headers, config."""

import pytest

from app import create_app
from models import db


@pytest.fixture
def app():
    app = create_app(
        {"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:", "QUIZ_CATALOG": "hardcoded"}
    )
    with app.app_context():
        db.create_all()
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


def test_homepage(client):
    response = client.get("/")
    assert response.status_code == 200


def test_unknown_page_is_404(client):
    response = client.get("/no_such_page_xyz")
    assert response.status_code == 404
    assert b"Page not found" in response.data


def test_security_headers(client):
    response = client.get("/")
    assert response.headers.get("X-Frame-Options") == "DENY"
    assert response.headers.get("X-Content-Type-Options") == "nosniff"
    assert response.headers.get("Content-Security-Policy")


def test_healthz_reports_db(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "db": True}


def test_healthz_strict_when_db_down(client, monkeypatch):
    from unittest.mock import patch

    monkeypatch.setenv("HEALTHZ_STRICT", "1")
    with patch.object(db.session, "execute", side_effect=Exception("down")), \
            patch("app.time.sleep"):
        response = client.get("/healthz")
    assert response.status_code == 503
    assert response.get_json()["db"] is False


def test_unknown_catalog_is_rejected():
    app = create_app(
        {"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:", "QUIZ_CATALOG": "mongo"}
    )
    with app.test_request_context("/"):
        from services.catalog import get_quiz_service

        with pytest.raises(ValueError):
            get_quiz_service()


def test_service_is_shared_within_a_request():
    from services.catalog import get_quiz_service

    # no app context pushed here, so each request context gets its own g
    app = create_app(
        {"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:", "QUIZ_CATALOG": "hardcoded"}
    )
    with app.test_request_context("/"):
        service = get_quiz_service()
        assert get_quiz_service() is service
        assert service.mapper.find(0) is service.mapper.find(0)
    with app.test_request_context("/"):
        assert get_quiz_service() is not service


def test_csrf_enforced_outside_tests():
    app = create_app(
        {"SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:", "QUIZ_CATALOG": "hardcoded"}
    )
    client = app.test_client()
    client.get("/choose-quiz/0")
    response = client.post("/check-answer", data={"id": "0"})
    # CSRF failure redirects back instead of scoring the answer
    assert response.status_code == 302
    end = client.get("/end").get_data(as_text=True)
    assert "Total: 0" in end
