"""Tests for the seed / clear maintenance scripts."""

import builtins

import pytest

from app import create_app
from clear_database import clear_all_data
from models import QuestionRecord, QuizRecord, db
from seed_database import seed_quizzes


@pytest.fixture
def app():
    app = create_app({"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:"})
    with app.app_context():
        db.create_all()
        yield app


def test_clear_removes_all_quizzes(app, monkeypatch):
    # Silence prints for cleaner test output
    monkeypatch.setattr(builtins, "print", lambda *a, **k: None)
    seed_quizzes(app)

    assert clear_all_data(app) == (2, 4)
    assert QuizRecord.query.count() == 0
    assert QuestionRecord.query.count() == 0


def test_clear_on_empty_database(app, monkeypatch):
    monkeypatch.setattr(builtins, "print", lambda *a, **k: None)
    assert clear_all_data(app) == (0, 0)


def test_seed_rolls_back_on_error(app):
    from unittest.mock import patch

    with patch.object(db.session, "commit", side_effect=Exception("DB error")):
        with pytest.raises(Exception, match="DB error"):
            seed_quizzes(app)
    assert QuizRecord.query.count() == 0
