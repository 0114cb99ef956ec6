# mappers/base.py - catalog interface consumed by the quiz service
from abc import ABC, abstractmethod
from typing import List, Optional

from entities import Quiz


class QuizMapper(ABC):
    """Read-only source of quizzes keyed by identifier."""

    @abstractmethod
    def find_all(self) -> List[Quiz]:
        ...

    @abstractmethod
    def find(self, quiz_id) -> Optional[Quiz]:
        """Return the quiz for ``quiz_id`` or None when the catalog has no such quiz."""
