"""Plain-text rendering of the end-of-game summary."""

from __future__ import annotations

from trivia_app.core.services.scoreboard import GameSummary


def render_summary_text(summary: GameSummary) -> str:
    """Render the final score, accuracy, category breakdown and grade.

    Args:
        summary: Summary produced when the session finished

    Returns:
        Multi-line text ready for a message box
    """
    lines = [
        "Game Over!",
        "",
        f"Final Score: {summary.total_score} points",
        f"Questions Attempted: {summary.question_count}",
        f"Correct Answers: {summary.correct_answers}",
        f"Accuracy: {summary.accuracy_percentage:.1f}%",
        "",
        "Category Breakdown:",
    ]
    for row in summary.category_breakdown:
        lines.append(f"{row.category}: {row.percentage:.1f}%")
    lines.append("")
    lines.append(f"{summary.grade}! {summary.grade_message}")
    return "\n".join(lines)
