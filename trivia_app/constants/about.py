"""Static metadata describing Triviamo."""

APP_NAME = "Triviamo"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Triviamo is a desktop trivia game built with Qt. Answer each question before "
    "the timer runs out; harder questions are worth more points."
)

HELP_TEXT = (
    "Pick one of the four answers for each question before the timer reaches zero.\n\n"
    "Points per correct answer:\n"
    "EASY: 100\nMEDIUM: 200\nHARD: 300\nEXPERT: 500\n\n"
    "Accuracy is measured against 100 points per question, so hard decks can score above 100%."
)
