# mappers/sql.py - database-backed catalog mapping quiz rows to entities
import logging
from typing import Dict, List, Optional

from entities import Question, Quiz
from mappers.base import QuizMapper
from models import QuestionRecord, QuizRecord, db

logger = logging.getLogger(__name__)

# signed 64-bit range of an INTEGER primary key
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class SqlQuizMapper(QuizMapper):
    """Loads quizzes through the Flask-SQLAlchemy session.

    Every mapped entity goes into an identity map owned by this instance, so a
    quiz looked up twice through the same mapper is the same object. Build one
    mapper per request to keep cached entities from leaking across requests.
    """

    def __init__(self, session=None):
        self._session = session if session is not None else db.session
        self._map: Dict[int, Quiz] = {}

    def find_all(self) -> List[Quiz]:
        rows = self._session.query(QuizRecord).order_by(QuizRecord.id).all()
        entities = []
        for row in rows:
            # keep already-mapped entities so identity holds within this mapper
            entity = self._map.get(row.id) or self._cache(self._row_to_entity(row))
            entities.append(entity)
        return entities

    def find(self, quiz_id) -> Optional[Quiz]:
        try:
            key = int(quiz_id)
        except (TypeError, ValueError):
            logger.warning("find with non-integer quiz id %r", quiz_id)
            return None
        if not MIN_ID <= key <= MAX_ID:
            logger.warning("find with out-of-range quiz id %r", quiz_id)
            return None
        if key in self._map:
            return self._map[key]
        row = self._session.get(QuizRecord, key)
        if row is None:
            return None
        return self._cache(self._row_to_entity(row))

    def _cache(self, entity: Quiz) -> Quiz:
        self._map[entity.id] = entity
        return entity

    @staticmethod
    def _row_to_entity(row: QuizRecord) -> Quiz:
        questions = [
            Question(q.prompt, list(q.candidates or []), q.correct_index, id=q.id)
            for q in row.questions
        ]
        return Quiz(row.title, questions, id=row.id)


def quiz_to_record(quiz: Quiz) -> QuizRecord:
    """Build an unsaved row (with its question rows) from a quiz entity."""
    record = QuizRecord(title=quiz.title)
    for position, question in enumerate(quiz.questions):
        record.questions.append(
            QuestionRecord(
                position=position,
                prompt=question.prompt,
                candidates=list(question.candidates),
                correct_index=question.correct_index,
            )
        )
    return record
