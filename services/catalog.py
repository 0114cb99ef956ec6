# services/catalog.py - builds the configured catalog and a per-request quiz service
from flask import current_app, g, session

from mappers.base import QuizMapper
from mappers.hardcoded import HardCodedQuizMapper
from mappers.sql import SqlQuizMapper
from services.quiz_service import QuizService

CATALOGS = {
    "hardcoded": HardCodedQuizMapper,
    "sql": SqlQuizMapper,
}


def make_mapper(name: str) -> QuizMapper:
    try:
        return CATALOGS[name]()
    except KeyError:
        raise ValueError(f"Unknown QUIZ_CATALOG {name!r}; expected one of {sorted(CATALOGS)}")


def get_quiz_service() -> QuizService:
    """Return the request's quiz service, creating it (and a fresh catalog) on first use."""
    if "quiz_service" not in g:
        mapper = make_mapper(current_app.config.get("QUIZ_CATALOG", "sql"))
        g.quiz_service = QuizService(mapper, session)
    return g.quiz_service
