# services/quiz_service.py - per-visitor quiz progression on top of a session store
import logging
from dataclasses import dataclass
from typing import List, MutableMapping, Optional, Union

from entities import Question, Quiz
from errors import AttemptComplete, NoActiveAttempt, NotFound
from mappers.base import QuizMapper
from services.session_helper import SessionHelper

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Result:
    correct: int
    incorrect: int
    pass_score: float

    @property
    def total(self) -> int:
        return self.correct + self.incorrect

    def has_passed(self) -> bool:
        return self.correct >= self.pass_score


class QuizService:
    """Tracks which quiz a visitor is taking, their position and their running score.

    All attempt state lives in ``store`` (``flask.session`` in the app, a plain
    dict in tests). Completion is derived from the stored question index and the
    quiz length rather than kept as a flag.
    """

    def __init__(self, mapper: QuizMapper, store: MutableMapping):
        self.mapper = mapper
        self.store = store

    def list_available_quizzes(self) -> List[Quiz]:
        # keep callers away from the mapper itself
        return self.mapper.find_all()

    def start_attempt(self, quiz_or_id: Union[Quiz, int, str]) -> Quiz:
        """Begin a new attempt, silently abandoning any unfinished one."""
        if isinstance(quiz_or_id, Quiz):
            quiz = quiz_or_id
            if quiz.id is None:
                # an unsaved quiz cannot be looked up again on later requests
                raise NotFound(None)
        else:
            quiz = self.mapper.find(quiz_or_id)
            if quiz is None:
                logger.warning("start_attempt: quiz %r not found", quiz_or_id)
                raise NotFound(quiz_or_id)
        SessionHelper.init_attempt(self.store, quiz.id)
        logger.info("attempt started quiz_id=%s questions=%s", quiz.id, quiz.question_count)
        return quiz

    def current_question(self) -> Question:
        quiz = self._current_quiz()
        index = self._current_index()
        if index >= quiz.question_count:
            raise AttemptComplete(f"No questions left in quiz {quiz.id!r}")
        return quiz.questions[index]

    def submit_answer(self, candidate_index: int) -> bool:
        question = self.current_question()
        is_correct = question.is_correct(candidate_index)
        self.store[SessionHelper.CURRENT_QUESTION] = self._current_index() + 1
        SessionHelper.increment(
            self.store, SessionHelper.CORRECT if is_correct else SessionHelper.INCORRECT
        )
        logger.debug("answer submitted candidate=%r correct=%s", candidate_index, is_correct)
        if self.is_complete():
            SessionHelper.clear_position(self.store)
            logger.info("attempt completed correct=%s incorrect=%s",
                        self.store.get(SessionHelper.CORRECT, 0),
                        self.store.get(SessionHelper.INCORRECT, 0))
        return is_correct

    def is_complete(self) -> bool:
        quiz = self._lookup_current_quiz()
        if quiz is None:
            return True
        return self._current_index() >= quiz.question_count

    def result(self) -> Result:
        correct = self.store.get(SessionHelper.CORRECT, 0)
        incorrect = self.store.get(SessionHelper.INCORRECT, 0)
        # TODO: threshold is half of the answers given so far, not half of the quiz length,
        # so a partial result moves as the attempt progresses; decide whether to use the quiz size.
        return Result(correct, incorrect, (correct + incorrect) / 2)

    def _lookup_current_quiz(self) -> Optional[Quiz]:
        quiz_id = self.store.get(SessionHelper.CURRENT_QUIZ)
        if quiz_id is None:
            return None
        return self.mapper.find(quiz_id)

    def _current_quiz(self) -> Quiz:
        quiz_id = self.store.get(SessionHelper.CURRENT_QUIZ)
        if quiz_id is None:
            raise NoActiveAttempt("No quiz has been started")
        quiz = self.mapper.find(quiz_id)
        if quiz is None:
            logger.warning("stored quiz %r no longer in catalog", quiz_id)
            raise NotFound(quiz_id)
        return quiz

    def _current_index(self) -> int:
        index = self.store.get(SessionHelper.CURRENT_QUESTION)
        return 0 if index is None else index
