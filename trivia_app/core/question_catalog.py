"""Built-in trivia questions shipped with the game."""

from __future__ import annotations

from trivia_app.core.models import Difficulty, Question

_CATALOG: tuple[tuple[str, str, tuple[str, str, str, str], Difficulty, str], ...] = (
    (
        "What is the capital of France?",
        "Paris",
        ("London", "Paris", "Berlin", "Madrid"),
        Difficulty.EASY,
        "Geography",
    ),
    (
        "Which is the largest country by land area?",
        "Russia",
        ("China", "USA", "Russia", "Canada"),
        Difficulty.EASY,
        "Geography",
    ),
    (
        "What is the hardest natural substance on Earth?",
        "Diamond",
        ("Gold", "Iron", "Diamond", "Platinum"),
        Difficulty.MEDIUM,
        "Science",
    ),
    (
        "What is the chemical symbol for gold?",
        "Au",
        ("Ag", "Au", "Fe", "Cu"),
        Difficulty.MEDIUM,
        "Science",
    ),
    (
        "In which year did World War II end?",
        "1945",
        ("1943", "1944", "1945", "1946"),
        Difficulty.MEDIUM,
        "History",
    ),
    (
        "Who was the first President of the United States?",
        "George Washington",
        ("Thomas Jefferson", "John Adams", "George Washington", "Benjamin Franklin"),
        Difficulty.EASY,
        "History",
    ),
    (
        "Who co-founded Apple Computer with Steve Jobs?",
        "Steve Wozniak",
        ("Bill Gates", "Steve Wozniak", "Mark Zuckerberg", "Jeff Bezos"),
        Difficulty.HARD,
        "Technology",
    ),
    (
        "What programming language was created by James Gosling?",
        "Java",
        ("Python", "Java", "C++", "JavaScript"),
        Difficulty.HARD,
        "Technology",
    ),
    (
        "Who wrote 'Romeo and Juliet'?",
        "William Shakespeare",
        ("Charles Dickens", "William Shakespeare", "Jane Austen", "Mark Twain"),
        Difficulty.EASY,
        "Literature",
    ),
    (
        "What's the first book of the Harry Potter series?",
        "Harry Potter and the Philosopher's Stone",
        (
            "Harry Potter and the Chamber of Secrets",
            "Harry Potter and the Philosopher's Stone",
            "Harry Potter and the Prisoner of Azkaban",
            "Harry Potter and the Goblet of Fire",
        ),
        Difficulty.MEDIUM,
        "Literature",
    ),
    (
        "What is the smallest prime number greater than 100?",
        "101",
        ("101", "102", "103", "107"),
        Difficulty.EXPERT,
        "Mathematics",
    ),
    (
        "Which scientist proposed the theory of special relativity?",
        "Albert Einstein",
        ("Isaac Newton", "Albert Einstein", "Niels Bohr", "Max Planck"),
        Difficulty.EXPERT,
        "Science",
    ),
)


def build_default_questions() -> list[Question]:
    """Create fresh Question instances for the built-in catalog."""
    return [
        Question(prompt, answer, options, difficulty, category)
        for prompt, answer, options, difficulty, category in _CATALOG
    ]
