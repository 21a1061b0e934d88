"""Domain models for the trivia game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Iterable

from trivia_app.constants.quiz_constants import OPTION_COUNT
from trivia_app.core.errors import AlreadyAnsweredError, InvalidQuestionError

if TYPE_CHECKING:
    from trivia_app.core.services.scoreboard import GameSummary


class Difficulty(Enum):
    """Difficulty levels and the points a correct answer is worth."""

    EASY = 100
    MEDIUM = 200
    HARD = 300
    EXPERT = 500

    @property
    def point_value(self) -> int:
        return self.value


class SessionPhase(Enum):
    """Phases of the per-question session state machine."""

    NOT_STARTED = auto()
    IN_QUESTION = auto()
    RESOLVED = auto()
    FINISHED = auto()


class ResolutionOutcome(Enum):
    """How a question left the IN_QUESTION phase."""

    CORRECT = auto()
    WRONG = auto()
    TIMEOUT = auto()


def _normalize(text: str) -> str:
    return text.lower()


class Question:
    """Multiple-choice trivia question with exactly four options.

    The trivia fact (prompt, answer, options, difficulty, category) is fixed at
    construction. Only the submission state changes, and an answer can be
    submitted once until ``reset()`` is called.
    """

    __slots__ = (
        "_prompt",
        "_correct_answer",
        "_options",
        "_difficulty",
        "_category",
        "_answered",
        "_submitted_answer",
    )

    def __init__(
        self,
        prompt: str,
        correct_answer: str,
        options: Iterable[str],
        difficulty: Difficulty,
        category: str,
    ) -> None:
        cleaned_prompt = prompt.strip()
        if not cleaned_prompt:
            raise InvalidQuestionError("Question text must not be empty.")
        cleaned_category = category.strip()
        if not cleaned_category:
            raise InvalidQuestionError("Question category must not be empty.")
        if not isinstance(difficulty, Difficulty):
            raise InvalidQuestionError(f"Unknown difficulty: {difficulty!r}")

        self._prompt = cleaned_prompt
        self._correct_answer = correct_answer.strip()
        self._options = self._validate_options(options, self._correct_answer)
        self._difficulty = difficulty
        self._category = cleaned_category
        self._answered = False
        self._submitted_answer: str | None = None

    @staticmethod
    def _validate_options(options: Iterable[str], correct_answer: str) -> tuple[str, ...]:
        cleaned = tuple(option.strip() for option in options)
        if len(cleaned) != OPTION_COUNT:
            raise InvalidQuestionError(f"Each question must have exactly {OPTION_COUNT} options.")
        if any(not option for option in cleaned):
            raise InvalidQuestionError("Option text cannot be empty.")
        normalized = {_normalize(option) for option in cleaned}
        if len(normalized) != len(cleaned):
            raise InvalidQuestionError("Options must be distinct.")
        if _normalize(correct_answer) not in normalized:
            raise InvalidQuestionError(
                f"Correct answer {correct_answer!r} is not one of the options."
            )
        return cleaned

    @property
    def prompt(self) -> str:
        return self._prompt

    @property
    def correct_answer(self) -> str:
        return self._correct_answer

    @property
    def options(self) -> tuple[str, ...]:
        return self._options

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def category(self) -> str:
        return self._category

    @property
    def point_value(self) -> int:
        return self._difficulty.point_value

    @property
    def answered(self) -> bool:
        return self._answered

    @property
    def submitted_answer(self) -> str | None:
        return self._submitted_answer

    def submit_answer(self, answer: str | None) -> bool:
        """Record the player's answer and return whether it is correct.

        ``None`` records a "no answer" submission (used when time runs out)
        and is never correct.
        """
        if self._answered:
            raise AlreadyAnsweredError(self._prompt)
        self._answered = True
        self._submitted_answer = answer
        return self.is_correct(answer)

    def is_correct(self, answer: str | None) -> bool:
        return answer is not None and answer.lower() == self._correct_answer.lower()

    def reset(self) -> None:
        self._answered = False
        self._submitted_answer = None

    def card_info(self) -> str:
        status = "Answered" if self._answered else "Not answered"
        return (
            f"Category: {self._category}\n"
            f"Difficulty: {self._difficulty.name}\n"
            f"Points: {self.point_value}\n"
            f"Status: {status}"
        )

    def __repr__(self) -> str:
        return (
            f"Question(prompt={self._prompt!r}, difficulty={self._difficulty.name}, "
            f"category={self._category!r}, answered={self._answered})"
        )


@dataclass(frozen=True, slots=True)
class QuestionResolution:
    """Outcome of a resolved question, exposed for answer highlighting."""

    outcome: ResolutionOutcome
    correct_answer: str
    submitted_answer: str | None
    points_awarded: int

    @property
    def is_correct(self) -> bool:
        return self.outcome is ResolutionOutcome.CORRECT

    @property
    def timed_out(self) -> bool:
        return self.outcome is ResolutionOutcome.TIMEOUT


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Read-only view of the session handed to the presentation layer."""

    phase: SessionPhase
    question_number: int
    question_count: int
    prompt: str | None
    options: tuple[str, ...]
    category: str | None
    difficulty: Difficulty | None
    point_value: int
    time_remaining: int
    time_budget: int
    total_score: int
    resolution: QuestionResolution | None = None
    summary: GameSummary | None = None
