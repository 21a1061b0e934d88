"""Application entry point for Triviamo."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from trivia_app.core.question_catalog import build_default_questions
from trivia_app.core.quiz_manager import QuizManager
from trivia_app.ui.trivia_main_window import TriviaMainWindow
from trivia_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, load the built-in deck, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting Triviamo…")

    quiz_manager = QuizManager()
    quiz_manager.load_questions(build_default_questions())
    logger.info("Loaded %d questions", quiz_manager.get_question_count())

    app = QApplication(sys.argv)
    window = TriviaMainWindow(quiz_manager=quiz_manager)
    window.show()
    window.start_game()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
