"""Qt UI components for the trivia game."""

from .dialog_helpers import confirm_play_again, show_info, show_warning
from .trivia_main_window import TriviaMainWindow

__all__ = [
    "TriviaMainWindow",
    "confirm_play_again",
    "show_info",
    "show_warning",
]
