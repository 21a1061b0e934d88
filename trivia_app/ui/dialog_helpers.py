"""Helper functions for common dialog patterns in the game UI."""

from __future__ import annotations

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QMessageBox, QWidget

from trivia_app.constants.ui_constants import GAME_OVER_TITLE, PLAY_AGAIN_PROMPT


def _apply_optional_font(widget: QWidget, font_point_size: int | None) -> None:
    """Apply font size to a widget when requested."""
    if font_point_size is None or font_point_size <= 0:
        return

    font: QFont = widget.font()
    font.setPointSize(font_point_size)
    widget.setFont(font)


def confirm_play_again(parent: QWidget, summary_text: str) -> bool:
    """Show the game-over summary and ask whether to replay.

    Args:
        parent: Parent widget for the dialog
        summary_text: Rendered end-of-game summary

    Returns:
        True if the player wants another round, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        GAME_OVER_TITLE,
        f"{summary_text}\n\n{PLAY_AGAIN_PROMPT}",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.Yes,
    )
    return reply == QMessageBox.Yes


def show_info(
    parent: QWidget,
    title: str,
    message: str,
    *,
    font_point_size: int | None = None,
) -> None:
    """Show information dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Information message
        font_point_size: Optional point size for the dialog text
    """
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    msg_box.setStandardButtons(QMessageBox.Ok)
    _apply_optional_font(msg_box, font_point_size)
    msg_box.exec()


def show_warning(parent: QWidget, title: str, message: str) -> None:
    """Show warning dialog."""
    QMessageBox.warning(parent, title, message)
