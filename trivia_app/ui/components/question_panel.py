"""Component showing the current question, its timer and answer buttons."""

from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.quiz_constants import (
    LOW_TIME_WARNING_SECONDS,
    OPTION_COUNT,
    TICK_INTERVAL_MS,
)
from trivia_app.constants.ui_constants import (
    CATEGORY_TEMPLATE,
    DEFAULT_GAME_FONT_SIZE,
    NEXT_QUESTION_BUTTON,
    PROGRESS_TEMPLATE,
    SCORE_TEMPLATE,
    TIMER_TEMPLATE,
    TIME_UP_MESSAGE,
)
from trivia_app.core.errors import QuizError
from trivia_app.core.models import QuestionResolution, SessionPhase, SessionSnapshot
from trivia_app.core.quiz_manager import QuizManager
from trivia_app.styling.color_palette import ColorPalette, Theme
from trivia_app.styling.styles import Styles
from trivia_app.ui.dialog_helpers import show_warning

logger = logging.getLogger(__name__)


class QuestionPanel(QWidget):
    """UI component for playing through the deck one question at a time."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_game_finished: Callable[[SessionSnapshot], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_game_finished = on_game_finished
        self._game_font_size: int = DEFAULT_GAME_FONT_SIZE
        self._theme = Theme.LIGHT
        self._snapshot: SessionSnapshot | None = None

        self._build_ui()
        self._configure_question_timer()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(30, 30, 30, 30)
        self.setLayout(layout)

        # Timer and progress
        top_row = QHBoxLayout()
        self.timer_label = QLabel("", self)
        self.timer_label.setAlignment(Qt.AlignCenter)
        top_row.addWidget(self.timer_label)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setTextVisible(True)
        top_row.addWidget(self.progress_bar, stretch=1)
        layout.addLayout(top_row)
        layout.addSpacing(20)

        # Category and score
        info_row = QHBoxLayout()
        self.category_label = QLabel("", self)
        info_row.addWidget(self.category_label)
        info_row.addStretch()
        self.score_label = QLabel(SCORE_TEMPLATE.format(score=0), self)
        info_row.addWidget(self.score_label)
        layout.addLayout(info_row)
        layout.addSpacing(30)

        self.question_label = QLabel("", self)
        self.question_label.setWordWrap(True)
        self.question_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.question_label)
        layout.addSpacing(30)

        grid = QGridLayout()
        grid.setSpacing(20)
        self.option_buttons: list[QPushButton] = []
        for idx in range(OPTION_COUNT):
            button = QPushButton("", self)
            button.setMinimumHeight(60)
            button.clicked.connect(lambda _checked=False, i=idx: self._handle_option_clicked(i))
            grid.addWidget(button, idx // 2, idx % 2)
            self.option_buttons.append(button)
        layout.addLayout(grid)
        layout.addSpacing(20)

        self.status_label = QLabel("", self)
        self.status_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.status_label)

        self.next_button = QPushButton(NEXT_QUESTION_BUTTON, self)
        self.next_button.setVisible(False)
        self.next_button.clicked.connect(self._handle_next_clicked)
        layout.addWidget(self.next_button, alignment=Qt.AlignCenter)
        layout.addStretch()

        self.apply_font_size(self._game_font_size)

    def _configure_question_timer(self) -> None:
        self.question_timer = QTimer(self)
        self.question_timer.setInterval(TICK_INTERVAL_MS)
        self.question_timer.timeout.connect(self._handle_tick)

    # --- Session control ---

    def start_game(self) -> None:
        self._show_snapshot(self.quiz_manager.start_game())

    def replay(self) -> None:
        self._show_snapshot(self.quiz_manager.replay())

    def stop(self) -> None:
        self.question_timer.stop()

    def resume(self) -> None:
        """Restart the countdown if a question is still waiting for an answer."""
        if self.quiz_manager.is_accepting_ticks() and not self.question_timer.isActive():
            self.question_timer.start()

    # --- Event handlers ---

    def _handle_tick(self) -> None:
        try:
            snapshot = self.quiz_manager.tick()
        except QuizError as exc:
            logger.warning("Tick rejected: %s", exc)
            self.question_timer.stop()
            return
        self._show_snapshot(snapshot)

    def _handle_option_clicked(self, index: int) -> None:
        self.question_timer.stop()
        choice = self.option_buttons[index].text()
        try:
            self.quiz_manager.answer(choice)
        except QuizError as exc:
            # Duplicate clicks land here once the question is resolved
            logger.warning("Answer rejected: %s", exc)
            return
        self._show_snapshot(self.quiz_manager.snapshot())

    def _handle_next_clicked(self) -> None:
        try:
            snapshot = self.quiz_manager.advance()
        except QuizError as exc:
            logger.warning("Advance rejected: %s", exc)
            show_warning(self, "Cannot continue", str(exc))
            return
        self._show_snapshot(snapshot)

    # --- Rendering ---

    def _show_snapshot(self, snapshot: SessionSnapshot) -> None:
        previous_phase = self._snapshot.phase if self._snapshot is not None else None
        self._snapshot = snapshot
        self._update_timer_label(snapshot)
        self.score_label.setText(SCORE_TEMPLATE.format(score=snapshot.total_score))

        if snapshot.phase is SessionPhase.IN_QUESTION:
            if previous_phase is not SessionPhase.IN_QUESTION or not self.question_timer.isActive():
                self._display_question(snapshot)
        elif snapshot.phase is SessionPhase.RESOLVED:
            self.question_timer.stop()
            if snapshot.resolution is not None:
                self._display_resolution(snapshot.resolution)
            self.next_button.setVisible(snapshot.question_number < snapshot.question_count)
            if snapshot.question_number >= snapshot.question_count:
                self._finish_game()
        elif snapshot.phase is SessionPhase.FINISHED:
            self.question_timer.stop()
            self.next_button.setVisible(False)
            self.on_game_finished(snapshot)

    def _finish_game(self) -> None:
        snapshot = self.quiz_manager.advance()
        self._snapshot = snapshot
        self.on_game_finished(snapshot)

    def _display_question(self, snapshot: SessionSnapshot) -> None:
        self.question_label.setText(snapshot.prompt or "")
        if snapshot.difficulty is not None:
            self.category_label.setText(
                CATEGORY_TEMPLATE.format(category=snapshot.category, difficulty=snapshot.difficulty.name)
            )
            color = ColorPalette.difficulty_color(snapshot.difficulty, self._theme)
            self.category_label.setStyleSheet(
                Styles.get_difficulty_label_style(color, self._game_font_size)
            )
        for button, option in zip(self.option_buttons, snapshot.options):
            button.setText(option)
            button.setEnabled(True)
            button.setStyleSheet(Styles.get_option_button_style(self._game_font_size))
        self.progress_bar.setRange(0, snapshot.question_count)
        self.progress_bar.setValue(snapshot.question_number)
        self.progress_bar.setFormat(
            PROGRESS_TEMPLATE.format(number=snapshot.question_number, count=snapshot.question_count)
        )
        self.status_label.setText("")
        self.next_button.setVisible(False)
        self.question_timer.start()

    def _display_resolution(self, resolution: QuestionResolution) -> None:
        correct_bg = ColorPalette.CORRECT_BG.get(self._theme)
        correct_fg = ColorPalette.CORRECT_TEXT.get(self._theme)
        wrong_bg = ColorPalette.WRONG_BG.get(self._theme)
        wrong_fg = ColorPalette.WRONG_TEXT.get(self._theme)
        for button in self.option_buttons:
            button.setEnabled(False)
            text = button.text()
            if text.lower() == resolution.correct_answer.lower():
                button.setStyleSheet(
                    Styles.get_option_button_style(self._game_font_size, correct_bg, correct_fg)
                )
            elif not resolution.is_correct and text == resolution.submitted_answer:
                button.setStyleSheet(
                    Styles.get_option_button_style(self._game_font_size, wrong_bg, wrong_fg)
                )
        if resolution.timed_out:
            self.status_label.setText(TIME_UP_MESSAGE)
        elif resolution.is_correct:
            self.status_label.setText(f"Correct! +{resolution.points_awarded}")
        else:
            self.status_label.setText(f"Wrong! The answer was {resolution.correct_answer}.")

    def _update_timer_label(self, snapshot: SessionSnapshot) -> None:
        warning = snapshot.time_remaining <= LOW_TIME_WARNING_SECONDS
        self.timer_label.setText(TIMER_TEMPLATE.format(seconds=snapshot.time_remaining))
        self.timer_label.setStyleSheet(
            Styles.get_timer_label_style(self._game_font_size, warning, self._theme)
        )

    def apply_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        label_style = f"font-size: {font_size}pt; font-weight: bold;"
        self.score_label.setStyleSheet(label_style)
        self.category_label.setStyleSheet(label_style)
        self.status_label.setStyleSheet(label_style)
        self.question_label.setStyleSheet(f"font-size: {font_size + 4}pt; font-weight: bold;")
        self.next_button.setStyleSheet(f"font-size: {font_size}pt; font-weight: bold;")
        if self._snapshot is None:
            for button in self.option_buttons:
                button.setStyleSheet(Styles.get_option_button_style(font_size))
            return
        # Re-render the current state with the new size
        self._update_timer_label(self._snapshot)
        if self._snapshot.difficulty is not None:
            color = ColorPalette.difficulty_color(self._snapshot.difficulty, self._theme)
            self.category_label.setStyleSheet(Styles.get_difficulty_label_style(color, font_size))
        if self._snapshot.phase is SessionPhase.IN_QUESTION:
            for button in self.option_buttons:
                button.setStyleSheet(Styles.get_option_button_style(font_size))
        elif self._snapshot.resolution is not None:
            self._display_resolution(self._snapshot.resolution)
