"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Triviamo - Fun Trivia Game"
WINDOW_MIN_WIDTH: int = 600
WINDOW_MIN_HEIGHT: int = 400
WINDOW_DEFAULT_WIDTH: int = 800
WINDOW_DEFAULT_HEIGHT: int = 600
DEFAULT_GAME_FONT_SIZE: int = 16

NEXT_QUESTION_BUTTON: str = "Next Question →"
SETTINGS_BUTTON: str = "Settings"
ABOUT_BUTTON: str = "About"
HELP_BUTTON: str = "Help"

PROGRESS_TEMPLATE: str = "Question {number} of {count}"
CATEGORY_TEMPLATE: str = "Category: {category} ({difficulty})"
SCORE_TEMPLATE: str = "Score: {score}"
TIMER_TEMPLATE: str = "{seconds}s"

GAME_OVER_TITLE: str = "Game Over"
PLAY_AGAIN_PROMPT: str = "Would you like to play again?"
TIME_UP_MESSAGE: str = "Time's up!"
SETTINGS_APPLY_NEXT_QUESTION: str = "The new time budget applies from the next question."
