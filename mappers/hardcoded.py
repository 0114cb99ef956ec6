# mappers/hardcoded.py - fixed in-memory catalog used for demos and tests
from typing import Dict, List, Optional

from entities import Question, Quiz
from mappers.base import QuizMapper

QUIZ_IDS = (0, 1)


def _fixture_questions() -> List[Question]:
    return [
        Question(
            "What color was George Washington's white horse?",
            ["White", "Gray", "Yellow", "All of the above"],
            0,
        ),
        Question(
            "Who's buried in Grant's tomb?",
            ["Grant", "George Washington", "George Washington's horse", "All of the above"],
            0,
        ),
    ]


class HardCodedQuizMapper(QuizMapper):
    def __init__(self):
        # identity map, scoped to this mapper instance
        self._map: Dict[int, Quiz] = {}

    def find_all(self) -> List[Quiz]:
        return [self.find(quiz_id) for quiz_id in QUIZ_IDS]

    def find(self, quiz_id) -> Optional[Quiz]:
        try:
            key = int(quiz_id)
        except (TypeError, ValueError):
            return None
        if key not in QUIZ_IDS:
            return None
        if key not in self._map:
            self._map[key] = Quiz(f"Quiz {key}", _fixture_questions(), id=key)
        return self._map[key]
