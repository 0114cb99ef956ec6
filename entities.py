# entities.py - immutable quiz and question values
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from errors import InvalidInput


@dataclass(frozen=True)
class Question:
    """One quiz item: a prompt, its candidate answers and the index of the right one."""

    prompt: str
    candidates: Tuple[str, ...]
    correct_index: int
    id: Optional[Any] = None

    def __post_init__(self):
        # accept any sequence but store a tuple so the value stays hashable
        object.__setattr__(self, "candidates", tuple(self.candidates))
        idx = self.correct_index
        if isinstance(idx, bool) or not isinstance(idx, int) or not 0 <= idx < len(self.candidates):
            raise InvalidInput(
                f"Invalid correct index {idx!r} for {len(self.candidates)} candidate(s)"
            )

    @property
    def correct_candidate(self) -> str:
        return self.candidates[self.correct_index]

    def is_correct(self, candidate_index: int) -> bool:
        return candidate_index == self.correct_index


@dataclass(frozen=True)
class Quiz:
    """A titled, ordered sequence of questions. Order is presentation order."""

    title: str
    questions: Tuple[Question, ...] = field(default_factory=tuple)
    id: Optional[Any] = None

    def __post_init__(self):
        object.__setattr__(self, "questions", tuple(self.questions))

    @property
    def question_count(self) -> int:
        return len(self.questions)
