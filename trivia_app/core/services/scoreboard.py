"""Service for tracking the score and building the end-of-game summary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from trivia_app.constants.quiz_constants import FALLBACK_GRADE, GRADE_BANDS
from trivia_app.core.models import Difficulty, Question


@dataclass(slots=True)
class CategoryEntry:
    """Mutable per-category tally used internally."""

    category: str
    total_points: int = 0
    scored_points: int = 0
    question_count: int = 0
    correct_answers: int = 0


@dataclass(frozen=True, slots=True)
class CategoryBreakdownRow:
    """Immutable per-category snapshot returned to consumers."""

    category: str
    total_points: int
    scored_points: int
    question_count: int
    correct_answers: int

    @property
    def percentage(self) -> float:
        if self.total_points <= 0:
            return 0.0
        return self.scored_points * 100.0 / self.total_points


@dataclass(frozen=True, slots=True)
class GameSummary:
    """Final results shown when the deck is exhausted."""

    total_score: int
    question_count: int
    correct_answers: int
    accuracy_percentage: float
    category_breakdown: tuple[CategoryBreakdownRow, ...]
    grade: str
    grade_message: str


def accuracy_percentage(total_score: int, question_count: int) -> float:
    """Score measured against an all-EASY baseline.

    This is not bounded by 100: a deck of harder questions can exceed it.
    """
    if question_count <= 0:
        return 0.0
    return total_score * 100.0 / (question_count * Difficulty.EASY.point_value)


def grade_for_accuracy(percentage: float) -> tuple[str, str]:
    """Return ``(grade, message)`` for an accuracy percentage."""
    for threshold, grade, message in GRADE_BANDS:
        if percentage >= threshold:
            return grade, message
    return FALLBACK_GRADE


class Scoreboard:
    """Tracks total and per-category points for one game."""

    def __init__(self) -> None:
        self._categories: dict[str, CategoryEntry] = {}
        self._total_score: int = 0
        self._correct_answers: int = 0
        self._question_count: int = 0

    def initialize(self, questions: Iterable[Question]) -> None:
        """Reset all tallies and register the deck's categories."""
        self.clear()
        for question in questions:
            entry = self._categories.get(question.category)
            if entry is None:
                entry = CategoryEntry(category=question.category)
                self._categories[question.category] = entry
            entry.total_points += question.point_value
            entry.question_count += 1
            self._question_count += 1

    def record_resolution(self, question: Question, is_correct: bool) -> int:
        """Apply a resolved question and return the points awarded."""
        if not is_correct:
            return 0
        points = question.point_value
        self._total_score += points
        self._correct_answers += 1
        entry = self._categories.get(question.category)
        if entry is not None:
            entry.scored_points += points
            entry.correct_answers += 1
        return points

    @property
    def total_score(self) -> int:
        return self._total_score

    @property
    def correct_answers(self) -> int:
        return self._correct_answers

    def get_category_breakdown(self) -> list[CategoryBreakdownRow]:
        return [
            CategoryBreakdownRow(
                category=entry.category,
                total_points=entry.total_points,
                scored_points=entry.scored_points,
                question_count=entry.question_count,
                correct_answers=entry.correct_answers,
            )
            for entry in self._categories.values()
        ]

    def build_summary(self) -> GameSummary:
        percentage = accuracy_percentage(self._total_score, self._question_count)
        grade, message = grade_for_accuracy(percentage)
        return GameSummary(
            total_score=self._total_score,
            question_count=self._question_count,
            correct_answers=self._correct_answers,
            accuracy_percentage=percentage,
            category_breakdown=tuple(self.get_category_breakdown()),
            grade=grade,
            grade_message=message,
        )

    def clear(self) -> None:
        """Reset all scores."""
        self._categories.clear()
        self._total_score = 0
        self._correct_answers = 0
        self._question_count = 0
