"""Tests for the Question / Quiz values."""

import pytest

from entities import Question, Quiz
from errors import InvalidInput


CANDIDATES = ["White", "Gray", "Yellow", "All of the above"]


@pytest.mark.parametrize("correct_index", range(len(CANDIDATES)))
def test_question_only_correct_index_is_correct(correct_index):
    q = Question("Color?", CANDIDATES, correct_index)
    assert q.is_correct(correct_index)
    for other in range(len(CANDIDATES)):
        if other != correct_index:
            assert not q.is_correct(other)


@pytest.mark.parametrize("bad_index", [-1, 4, 10, None, "0", True])
def test_question_rejects_invalid_correct_index(bad_index):
    with pytest.raises(InvalidInput):
        Question("Color?", CANDIDATES, bad_index)


def test_question_without_candidates_is_invalid():
    with pytest.raises(InvalidInput):
        Question("Nothing to pick", [], 0)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        Question("Color?", CANDIDATES, 7)


def test_correct_candidate_text():
    q = Question("Who's buried in Grant's tomb?", ["Grant", "Nobody"], 0)
    assert q.correct_candidate == "Grant"


def test_question_is_immutable():
    q = Question("Color?", CANDIDATES, 0)
    assert isinstance(q.candidates, tuple)
    with pytest.raises(AttributeError):
        q.correct_index = 1


def test_is_correct_does_not_mutate():
    q = Question("Color?", CANDIDATES, 2)
    q.is_correct(0)
    q.is_correct(2)
    assert q == Question("Color?", CANDIDATES, 2)


def test_quiz_keeps_question_order_and_count():
    q1 = Question("First?", ["a", "b"], 0)
    q2 = Question("Second?", ["a", "b"], 1)
    quiz = Quiz("Ordered", [q1, q2], id=3)
    assert quiz.questions == (q1, q2)
    assert quiz.question_count == 2
    assert quiz.id == 3


def test_empty_quiz_is_legal():
    quiz = Quiz("Empty", [])
    assert quiz.question_count == 0
    assert quiz.id is None
