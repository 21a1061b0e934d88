"""Service driving a single trivia game through its per-question phases."""

from __future__ import annotations

import logging
import random

from trivia_app.constants.quiz_constants import DEFAULT_QUESTION_TIME_BUDGET_SECONDS
from trivia_app.core.errors import InvalidTransitionError
from trivia_app.core.models import (
    Question,
    QuestionResolution,
    ResolutionOutcome,
    SessionPhase,
    SessionSnapshot,
)
from trivia_app.core.services.quiz_deck import QuizDeck
from trivia_app.core.services.scoreboard import GameSummary, Scoreboard

logger = logging.getLogger(__name__)


class GameSession:
    """State machine for one game.

    Phases move ``NOT_STARTED -> IN_QUESTION -> RESOLVED -> (IN_QUESTION | FINISHED)``.
    The session never owns a timer: callers deliver ``tick()`` once per second
    from whatever scheduler they use.
    """

    def __init__(self, question_time_budget: int = DEFAULT_QUESTION_TIME_BUDGET_SECONDS) -> None:
        self._question_time_budget = self._validate_time_budget(question_time_budget)
        self._deck: QuizDeck | None = None
        self._phase = SessionPhase.NOT_STARTED
        self._current_index: int = 0
        self._time_remaining: int = self._question_time_budget
        self._resolution: QuestionResolution | None = None
        self._summary: GameSummary | None = None
        self._scoreboard = Scoreboard()

        # Shuffle state
        self._shuffle_rng = random.Random()
        self._current_shuffled_options: tuple[str, ...] = ()

    @staticmethod
    def _validate_time_budget(seconds: int) -> int:
        if not isinstance(seconds, int) or isinstance(seconds, bool):
            raise ValueError("Time budget must be provided as an integer number of seconds.")
        if seconds <= 0:
            raise ValueError("Time budget must be a positive integer.")
        return seconds

    # --- Configuration ---

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._shuffle_rng.seed(seed)

    def set_question_time_budget(self, seconds: int) -> None:
        """Change the budget used from the next question onwards."""
        self._question_time_budget = self._validate_time_budget(seconds)

    @property
    def question_time_budget(self) -> int:
        return self._question_time_budget

    # --- State accessors ---

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def total_score(self) -> int:
        return self._scoreboard.total_score

    @property
    def time_remaining(self) -> int:
        return self._time_remaining

    @property
    def resolution(self) -> QuestionResolution | None:
        return self._resolution

    @property
    def summary(self) -> GameSummary | None:
        return self._summary

    @property
    def deck(self) -> QuizDeck | None:
        return self._deck

    @property
    def question_count(self) -> int:
        return self._deck.size() if self._deck is not None else 0

    def get_current_question(self) -> Question | None:
        if self._deck is None or self._phase is SessionPhase.NOT_STARTED:
            return None
        return self._deck.at(self._current_index)

    def get_display_options(self) -> tuple[str, ...]:
        return self._current_shuffled_options

    # --- Events ---

    def start(self, deck: QuizDeck) -> None:
        """Begin a new game on ``deck``, discarding any game in progress."""
        self._deck = deck
        deck.reset_all()
        deck.shuffle(self._shuffle_rng)
        self._scoreboard.initialize(deck)
        self._summary = None
        self._enter_question(0)
        logger.info("Game started with %d questions", deck.size())

    def replay(self) -> None:
        """Start over on the same deck with a fresh shuffle."""
        if self._deck is None or self._phase is SessionPhase.NOT_STARTED:
            raise InvalidTransitionError("replay", self._phase)
        logger.info("Replaying game (previous score %d)", self.total_score)
        self.start(self._deck)

    def tick(self) -> bool:
        """Count down one second. Returns False for a stale tick that changed nothing."""
        if self._phase is SessionPhase.NOT_STARTED:
            raise InvalidTransitionError("tick", self._phase)
        if self._phase is not SessionPhase.IN_QUESTION:
            logger.debug("Ignoring stale tick while %s", self._phase.name)
            return False

        self._time_remaining -= 1
        if self._time_remaining <= 0:
            self._time_remaining = 0
            question = self._require_question()
            # The timeout uses up the question's single submission.
            question.submit_answer(None)
            self._resolve(question, ResolutionOutcome.TIMEOUT)
        return True

    def answer(self, choice_text: str) -> QuestionResolution:
        if self._phase is not SessionPhase.IN_QUESTION:
            raise InvalidTransitionError("answer", self._phase)
        question = self._require_question()
        is_correct = question.submit_answer(choice_text)
        outcome = ResolutionOutcome.CORRECT if is_correct else ResolutionOutcome.WRONG
        return self._resolve(question, outcome)

    def advance(self) -> SessionPhase:
        if self._phase is not SessionPhase.RESOLVED:
            raise InvalidTransitionError("advance", self._phase)
        if self._current_index < self.question_count - 1:
            self._enter_question(self._current_index + 1)
        else:
            self._finish()
        return self._phase

    # --- Internals ---

    def _require_question(self) -> Question:
        question = self.get_current_question()
        if question is None:
            raise InvalidTransitionError("resolve", self._phase)
        return question

    def _enter_question(self, index: int) -> None:
        if self._deck is None:
            raise InvalidTransitionError("enter_question", self._phase)
        question = self._deck.at(index)
        self._current_index = index
        self._time_remaining = self._question_time_budget
        self._resolution = None
        self._phase = SessionPhase.IN_QUESTION
        self._shuffle_options(question)
        logger.debug("Question %d/%d: %s", index + 1, self._deck.size(), question.prompt)

    def _resolve(self, question: Question, outcome: ResolutionOutcome) -> QuestionResolution:
        points = self._scoreboard.record_resolution(question, outcome is ResolutionOutcome.CORRECT)
        self._resolution = QuestionResolution(
            outcome=outcome,
            correct_answer=question.correct_answer,
            submitted_answer=question.submitted_answer,
            points_awarded=points,
        )
        self._phase = SessionPhase.RESOLVED
        logger.debug(
            "Question %d resolved as %s (+%d, total %d)",
            self._current_index + 1,
            outcome.name,
            points,
            self.total_score,
        )
        return self._resolution

    def _finish(self) -> None:
        self._summary = self._scoreboard.build_summary()
        self._phase = SessionPhase.FINISHED
        logger.info(
            "Game finished: score %d, accuracy %.1f%%, grade %s",
            self._summary.total_score,
            self._summary.accuracy_percentage,
            self._summary.grade,
        )

    def _shuffle_options(self, question: Question) -> None:
        options = list(question.options)
        self._shuffle_rng.shuffle(options)
        self._current_shuffled_options = tuple(options)

    def snapshot(self) -> SessionSnapshot:
        question = self.get_current_question()
        return SessionSnapshot(
            phase=self._phase,
            question_number=self._current_index + 1 if question is not None else 0,
            question_count=self.question_count,
            prompt=question.prompt if question is not None else None,
            options=self._current_shuffled_options if question is not None else (),
            category=question.category if question is not None else None,
            difficulty=question.difficulty if question is not None else None,
            point_value=question.point_value if question is not None else 0,
            time_remaining=self._time_remaining,
            time_budget=self._question_time_budget,
            total_score=self.total_score,
            resolution=self._resolution,
            summary=self._summary,
        )
