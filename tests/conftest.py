"""Shared fixtures for the trivia engine tests."""

from __future__ import annotations

import pytest

from trivia_app.core.models import Difficulty, Question
from trivia_app.core.services.quiz_deck import QuizDeck


def make_question(
    prompt: str = "What is the capital of France?",
    answer: str = "Paris",
    options: tuple[str, ...] = ("London", "Paris", "Berlin", "Madrid"),
    difficulty: Difficulty = Difficulty.EASY,
    category: str = "Geography",
) -> Question:
    return Question(prompt, answer, options, difficulty, category)


@pytest.fixture
def paris_question() -> Question:
    return make_question()


@pytest.fixture
def gold_question() -> Question:
    return make_question(
        prompt="What is the chemical symbol for gold?",
        answer="Au",
        options=("Ag", "Au", "Fe", "Cu"),
        difficulty=Difficulty.MEDIUM,
        category="Science",
    )


@pytest.fixture
def two_question_deck(paris_question: Question, gold_question: Question) -> QuizDeck:
    return QuizDeck([paris_question, gold_question])


@pytest.fixture
def mixed_questions() -> list[Question]:
    return [
        make_question(),
        make_question(
            prompt="What is the chemical symbol for gold?",
            answer="Au",
            options=("Ag", "Au", "Fe", "Cu"),
            difficulty=Difficulty.MEDIUM,
            category="Science",
        ),
        make_question(
            prompt="What programming language was created by James Gosling?",
            answer="Java",
            options=("Python", "Java", "C++", "JavaScript"),
            difficulty=Difficulty.HARD,
            category="Technology",
        ),
        make_question(
            prompt="What is the smallest prime number greater than 100?",
            answer="101",
            options=("101", "102", "103", "107"),
            difficulty=Difficulty.EXPERT,
            category="Mathematics",
        ),
    ]
