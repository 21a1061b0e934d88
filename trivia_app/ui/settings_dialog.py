"""Settings dialog for configuring Triviamo preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from trivia_app.constants.quiz_constants import (
    MAX_QUESTION_TIME_BUDGET_SECONDS,
    MIN_QUESTION_TIME_BUDGET_SECONDS,
)


class SettingsDialog(QDialog):
    """Dialog for configuring game settings."""

    def __init__(
        self,
        parent=None,
        question_time_budget: int = 30,
        game_font_size: int = 16,
        shuffle_seed: int | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._question_time_budget = max(
            MIN_QUESTION_TIME_BUDGET_SECONDS,
            min(MAX_QUESTION_TIME_BUDGET_SECONDS, question_time_budget),
        )
        self._game_font_size = game_font_size
        self._shuffle_seed = shuffle_seed

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        game_group = QGroupBox("Game")
        game_layout = QVBoxLayout()
        game_group.setLayout(game_layout)

        budget_row = QHBoxLayout()
        budget_label = QLabel("Time per question:")
        budget_label.setToolTip("Seconds allowed before a question times out")
        self.budget_spinbox = QSpinBox()
        self.budget_spinbox.setRange(MIN_QUESTION_TIME_BUDGET_SECONDS, MAX_QUESTION_TIME_BUDGET_SECONDS)
        self.budget_spinbox.setValue(self._question_time_budget)
        self.budget_spinbox.setSuffix(" s")
        budget_row.addWidget(budget_label)
        budget_row.addStretch()
        budget_row.addWidget(self.budget_spinbox)
        game_layout.addLayout(budget_row)

        # Seeded shuffles make a round reproducible
        self.seed_checkbox = QCheckBox("Use fixed shuffle seed")
        self.seed_checkbox.setChecked(self._shuffle_seed is not None)
        game_layout.addWidget(self.seed_checkbox)

        seed_row = QHBoxLayout()
        seed_label = QLabel("Shuffle seed:")
        self.seed_spinbox = QSpinBox()
        self.seed_spinbox.setRange(0, 999999)
        self.seed_spinbox.setValue(self._shuffle_seed or 0)
        self.seed_spinbox.setEnabled(self._shuffle_seed is not None)
        self.seed_checkbox.toggled.connect(self.seed_spinbox.setEnabled)
        seed_row.addWidget(seed_label)
        seed_row.addStretch()
        seed_row.addWidget(self.seed_spinbox)
        game_layout.addLayout(seed_row)

        layout.addWidget(game_group)

        font_group = QGroupBox("Display")
        font_layout = QHBoxLayout()
        font_group.setLayout(font_layout)
        font_label = QLabel("Game Font Size (questions, answers):")
        self.font_spinbox = QSpinBox()
        self.font_spinbox.setRange(10, 32)
        self.font_spinbox.setValue(self._game_font_size)
        self.font_spinbox.setSuffix(" pt")
        font_layout.addWidget(font_label)
        font_layout.addStretch()
        font_layout.addWidget(self.font_spinbox)
        layout.addWidget(font_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_question_time_budget(self) -> int:
        """Get the selected number of seconds per question."""
        return self.budget_spinbox.value()

    def get_game_font_size(self) -> int:
        """Get the selected game font size."""
        return self.font_spinbox.value()

    def get_shuffle_seed(self) -> int | None:
        """Get the fixed shuffle seed, or None for a random shuffle."""
        if not self.seed_checkbox.isChecked():
            return None
        return self.seed_spinbox.value()
