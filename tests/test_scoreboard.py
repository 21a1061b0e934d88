"""Tests for score tracking, accuracy and grading."""

from __future__ import annotations

import pytest

from trivia_app.core.models import Difficulty
from trivia_app.core.services.scoreboard import (
    Scoreboard,
    accuracy_percentage,
    grade_for_accuracy,
)
from trivia_app.core.summary_report import render_summary_text

from tests.conftest import make_question


def test_accuracy_uses_easy_baseline():
    assert accuracy_percentage(100, 2) == 50.0
    assert accuracy_percentage(0, 5) == 0.0
    # Harder decks can exceed 100
    assert accuracy_percentage(500, 1) == 500.0


def test_accuracy_with_no_questions():
    assert accuracy_percentage(0, 0) == 0.0


@pytest.mark.parametrize(
    "percentage, grade",
    [
        (150.0, "Outstanding"),
        (90.0, "Outstanding"),
        (89.9, "Excellent"),
        (80.0, "Excellent"),
        (70.0, "Great"),
        (69.99, "Good effort"),
        (60.0, "Good effort"),
        (59.9, "Keep practicing"),
        (0.0, "Keep practicing"),
    ],
)
def test_grade_bands_inclusive(percentage, grade):
    assert grade_for_accuracy(percentage)[0] == grade


def test_record_resolution_tracks_categories(mixed_questions):
    board = Scoreboard()
    board.initialize(mixed_questions)
    geography, science, technology, maths = mixed_questions

    assert board.record_resolution(geography, True) == 100
    assert board.record_resolution(science, False) == 0
    assert board.record_resolution(maths, True) == 500

    assert board.total_score == 600
    assert board.correct_answers == 2
    rows = {row.category: row for row in board.get_category_breakdown()}
    assert rows["Geography"].percentage == 100.0
    assert rows["Science"].percentage == 0.0
    assert rows["Technology"].scored_points == 0
    assert rows["Technology"].total_points == 300
    assert rows["Mathematics"].percentage == 100.0


def test_summary_for_partial_category(paris_question, gold_question):
    capital_of_spain = make_question(
        prompt="What is the capital of Spain?",
        answer="Madrid",
        difficulty=Difficulty.MEDIUM,
    )
    board = Scoreboard()
    board.initialize([paris_question, gold_question, capital_of_spain])
    board.record_resolution(paris_question, True)
    board.record_resolution(capital_of_spain, False)

    summary = board.build_summary()
    assert summary.total_score == 100
    assert summary.question_count == 3
    rows = {row.category: row for row in summary.category_breakdown}
    assert rows["Geography"].total_points == 300
    assert rows["Geography"].percentage == pytest.approx(100 * 100 / 300)


def test_initialize_clears_previous_game(mixed_questions):
    board = Scoreboard()
    board.initialize(mixed_questions)
    board.record_resolution(mixed_questions[0], True)
    board.initialize(mixed_questions)
    assert board.total_score == 0
    assert all(row.scored_points == 0 for row in board.get_category_breakdown())


def test_render_summary_text(mixed_questions):
    board = Scoreboard()
    board.initialize(mixed_questions)
    board.record_resolution(mixed_questions[3], True)
    text = render_summary_text(board.build_summary())
    assert "Final Score: 500 points" in text
    assert "Questions Attempted: 4" in text
    assert "Accuracy: 125.0%" in text
    assert "Mathematics: 100.0%" in text
    assert "Geography: 0.0%" in text
    assert "Outstanding!" in text
