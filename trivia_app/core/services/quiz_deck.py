"""Service holding the ordered deck of questions for one game."""

from __future__ import annotations

import random
from typing import Iterable, Iterator

from trivia_app.core.errors import IndexOutOfRangeError
from trivia_app.core.models import Question


class QuizDeck:
    """Ordered, shuffleable collection of questions with fixed membership."""

    def __init__(self, questions: Iterable[Question]) -> None:
        prepared = list(questions)
        if not prepared:
            raise ValueError("Deck must contain at least one question.")
        if len({id(question) for question in prepared}) != len(prepared):
            raise ValueError("The same question cannot appear twice in a deck.")
        for question in prepared:
            if not isinstance(question, Question):
                raise ValueError(f"Deck entries must be questions, got {type(question).__name__}.")
        self._questions: list[Question] = prepared

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Reorder the deck in place with a uniformly random permutation."""
        (rng or random).shuffle(self._questions)

    def size(self) -> int:
        return len(self._questions)

    def at(self, index: int) -> Question:
        if not 0 <= index < len(self._questions):
            raise IndexOutOfRangeError(index, len(self._questions))
        return self._questions[index]

    def questions(self) -> tuple[Question, ...]:
        """Return the current ordering without exposing the backing list."""
        return tuple(self._questions)

    def reset_all(self) -> None:
        for question in self._questions:
            question.reset()

    def total_points(self) -> int:
        return sum(question.point_value for question in self._questions)

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        return list(dict.fromkeys(question.category for question in self._questions))

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(tuple(self._questions))
