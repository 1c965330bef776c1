from __future__ import annotations

__all__ = ["InvalidOptionError", "OutOfRangeError", "QuizError"]


class QuizError(ValueError):
    """Base class for rejected quiz answers."""

    def __init__(self, subject: str, message: str) -> None:
        super().__init__(message)
        self.subject = subject


class OutOfRangeError(QuizError):
    """The quiz cursor has left the question window of its quiz."""

    def __init__(self, subject: str, message: str | None = None) -> None:
        super().__init__(subject, message or f"{subject} out of range")


class InvalidOptionError(QuizError):
    """The submitted answer option is outside 1-4."""

    def __init__(self, subject: str, message: str | None = None) -> None:
        super().__init__(subject, message or f"{subject} must be between 1 and 4")
