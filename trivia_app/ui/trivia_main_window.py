"""Qt main window hosting the trivia game."""

from __future__ import annotations

import logging

from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from trivia_app.constants.ui_constants import (
    ABOUT_BUTTON,
    DEFAULT_GAME_FONT_SIZE,
    HELP_BUTTON,
    SETTINGS_APPLY_NEXT_QUESTION,
    SETTINGS_BUTTON,
    WINDOW_DEFAULT_HEIGHT,
    WINDOW_DEFAULT_WIDTH,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from trivia_app.core.models import SessionSnapshot
from trivia_app.core.quiz_manager import QuizManager
from trivia_app.core.summary_report import render_summary_text
from trivia_app.styling.styles import Styles
from trivia_app.ui.components.question_panel import QuestionPanel
from trivia_app.ui.dialog_helpers import confirm_play_again, show_info
from trivia_app.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class TriviaMainWindow(QMainWindow):
    """Main Qt window running one trivia game after another."""

    def __init__(self, quiz_manager: QuizManager) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(WINDOW_DEFAULT_WIDTH, WINDOW_DEFAULT_HEIGHT)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.quiz_manager = quiz_manager
        self._game_font_size: int = DEFAULT_GAME_FONT_SIZE
        self._shuffle_seed: int | None = None

        self._build_ui()
        self._apply_styles()
        self.quiz_manager.set_shuffle_seed(self._shuffle_seed)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.settings_button = QPushButton(SETTINGS_BUTTON, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        self.help_button = QPushButton(HELP_BUTTON, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        root_layout.addLayout(button_row)

        self.question_panel = QuestionPanel(
            self.quiz_manager,
            on_game_finished=self._handle_game_finished,
            parent=self,
        )
        root_layout.addWidget(self.question_panel, stretch=1)

    def start_game(self) -> None:
        self.question_panel.start_game()

    def _handle_game_finished(self, snapshot: SessionSnapshot) -> None:
        if snapshot.summary is None:
            return
        if confirm_play_again(self, render_summary_text(snapshot.summary)):
            self.question_panel.replay()
        else:
            logger.info(
                "Player declined replay with %d points; closing",
                self.quiz_manager.get_total_score(),
            )
            self.close()

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self.quiz_manager.get_question_time_budget(),
            self._game_font_size,
            self._shuffle_seed,
        )
        # No ticks while the modal dialog is open
        self.question_panel.stop()
        accepted = dialog.exec()
        self.question_panel.resume()
        if accepted:
            budget = dialog.get_question_time_budget()
            budget_changed = budget != self.quiz_manager.get_question_time_budget()
            self._game_font_size = dialog.get_game_font_size()
            self._shuffle_seed = dialog.get_shuffle_seed()

            self.quiz_manager.set_question_time_budget(budget)
            self.quiz_manager.set_shuffle_seed(self._shuffle_seed)
            self._apply_styles()
            if budget_changed:
                show_info(self, "Settings", SETTINGS_APPLY_NEXT_QUESTION)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details, font_point_size=self._game_font_size)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT, font_point_size=self._game_font_size)

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())
        self.question_panel.apply_font_size(self._game_font_size)

    def closeEvent(self, event) -> None:
        self.question_panel.stop()
        super().closeEvent(event)
