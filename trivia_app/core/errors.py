"""Exceptions raised by the trivia session engine."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for trivia engine errors."""


class InvalidQuestionError(QuizError, ValueError):
    """Raised when a question is constructed with malformed data."""


class AlreadyAnsweredError(QuizError, RuntimeError):
    """Raised when an answer is submitted twice for the same question."""

    def __init__(self, prompt: str) -> None:
        super().__init__(f"Question has already been answered: {prompt!r}")
        self.prompt = prompt


class InvalidTransitionError(QuizError, RuntimeError):
    """Raised when an event is delivered in a phase that does not accept it."""

    def __init__(self, event: str, phase: object) -> None:
        phase_name = getattr(phase, "name", str(phase))
        super().__init__(f"Cannot handle '{event}' while session is {phase_name}.")
        self.event = event
        self.phase = phase


class IndexOutOfRangeError(QuizError, IndexError):
    """Raised when a deck position outside the deck is requested."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Question index {index} out of range for deck of {size}")
        self.index = index
        self.size = size
