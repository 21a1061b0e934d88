"""Quiz-related constants shared across UI and core layers."""

DEFAULT_QUESTION_TIME_BUDGET_SECONDS: int = 30
MIN_QUESTION_TIME_BUDGET_SECONDS: int = 5
MAX_QUESTION_TIME_BUDGET_SECONDS: int = 120
OPTION_COUNT: int = 4
TICK_INTERVAL_MS: int = 1000
LOW_TIME_WARNING_SECONDS: int = 10

# (inclusive threshold, grade, encouragement) ordered highest first
GRADE_BANDS: tuple[tuple[float, str, str], ...] = (
    (90.0, "Outstanding", "You're a trivia master!"),
    (80.0, "Excellent", "Very knowledgeable!"),
    (70.0, "Great", "Keep learning!"),
    (60.0, "Good effort", "Room for improvement!"),
)
FALLBACK_GRADE: tuple[str, str] = ("Keep practicing", "You'll get better!")
