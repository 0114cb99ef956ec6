# errors.py - error kinds raised by the quiz entities, catalogs and session service


class QuizError(Exception):
    """Base class for every quiz domain error."""


class InvalidInput(QuizError, ValueError):
    """A question was built with a correct index outside its candidates."""


class NotFound(QuizError, LookupError):
    """The catalog has no quiz for the given identifier."""

    def __init__(self, quiz_id=None):
        self.quiz_id = quiz_id
        super().__init__(f"Quiz not found: {quiz_id!r}")


class NoActiveAttempt(QuizError, RuntimeError):
    """The visitor has not started a quiz."""


class AttemptComplete(QuizError, RuntimeError):
    """The current attempt has no questions left."""
