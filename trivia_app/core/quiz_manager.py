"""Business logic facade shared between the timer and player intents."""

from __future__ import annotations

from threading import Lock
from typing import Iterable

from trivia_app.constants.quiz_constants import DEFAULT_QUESTION_TIME_BUDGET_SECONDS
from trivia_app.core.models import Question, QuestionResolution, SessionPhase, SessionSnapshot
from trivia_app.core.services.game_session import GameSession
from trivia_app.core.services.quiz_deck import QuizDeck
from trivia_app.core.services.scoreboard import GameSummary


class QuizManager:
    """Facade over QuizDeck and GameSession.

    Every call holds a single lock, so a timer thread delivering ``tick()``
    can never interleave with an ``answer()`` mid-transition.
    """

    def __init__(self, question_time_budget: int = DEFAULT_QUESTION_TIME_BUDGET_SECONDS) -> None:
        self._lock = Lock()
        self._deck: QuizDeck | None = None
        self._session = GameSession(question_time_budget)

    # --- Deck ---

    def load_questions(self, questions: Iterable[Question]) -> None:
        """Replace the deck; any game in progress is abandoned."""
        deck = QuizDeck(questions)
        with self._lock:
            self._deck = deck
            self._session = GameSession(self._session.question_time_budget)

    def get_question_count(self) -> int:
        with self._lock:
            return self._deck.size() if self._deck is not None else 0

    # --- Player intents ---

    def start_game(self) -> SessionSnapshot:
        with self._lock:
            if self._deck is None:
                raise ValueError("No questions loaded.")
            self._session.start(self._deck)
            return self._session.snapshot()

    def replay(self) -> SessionSnapshot:
        with self._lock:
            self._session.replay()
            return self._session.snapshot()

    def tick(self) -> SessionSnapshot:
        with self._lock:
            self._session.tick()
            return self._session.snapshot()

    def answer(self, choice_text: str) -> QuestionResolution:
        with self._lock:
            return self._session.answer(choice_text)

    def advance(self) -> SessionSnapshot:
        with self._lock:
            self._session.advance()
            return self._session.snapshot()

    # --- State ---

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return self._session.snapshot()

    def get_phase(self) -> SessionPhase:
        with self._lock:
            return self._session.phase

    def get_total_score(self) -> int:
        with self._lock:
            return self._session.total_score

    def get_summary(self) -> GameSummary | None:
        with self._lock:
            return self._session.summary

    def is_accepting_ticks(self) -> bool:
        """Whether a countdown should be running for the current question."""
        with self._lock:
            return self._session.phase is SessionPhase.IN_QUESTION

    # --- Settings ---

    def set_shuffle_seed(self, seed: int | None) -> None:
        with self._lock:
            self._session.set_shuffle_seed(seed)

    def set_question_time_budget(self, seconds: int) -> None:
        with self._lock:
            self._session.set_question_time_budget(seconds)

    def get_question_time_budget(self) -> int:
        with self._lock:
            return self._session.question_time_budget
