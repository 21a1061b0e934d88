"""Color palette for Triviamo supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from trivia_app.core.models import Difficulty


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(
        light="#212121",      # Near black
        dark="#F5F5F5"        # WhiteSmoke
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#F0F4F8",      # Pale blue-gray
        dark="#1E1E1E"        # Dark Gray
    )

    BUTTON_BG = ThemeColors(
        light="#FFFFFF",      # White
        dark="#2D2D2D"        # Slightly lighter dark
    )

    ACCENT = ThemeColors(
        light="#4682B4",      # Steel blue
        dark="#6CA6E0"        # Lighter steel blue
    )

    ACCENT_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#000000"
    )

    TIMER_WARNING = ThemeColors(
        light="#D32F2F",      # Red
        dark="#FF6B6B"        # Light Red
    )

    # Answer highlighting
    CORRECT_BG = ThemeColors(light="#90EE90", dark="#2E7D32")
    CORRECT_TEXT = ThemeColors(light="#006400", dark="#E8F5E9")
    WRONG_BG = ThemeColors(light="#FFB6C1", dark="#B71C1C")
    WRONG_TEXT = ThemeColors(light="#8B0000", dark="#FFEBEE")

    DIFFICULTY = {
        Difficulty.EASY: ThemeColors(light="#4CAF50", dark="#81C784"),
        Difficulty.MEDIUM: ThemeColors(light="#FF9800", dark="#FFB74D"),
        Difficulty.HARD: ThemeColors(light="#F44336", dark="#E57373"),
        Difficulty.EXPERT: ThemeColors(light="#9C27B0", dark="#BA68C8"),
    }

    @classmethod
    def difficulty_color(cls, difficulty: Difficulty, theme: Theme = Theme.LIGHT) -> str:
        return cls.DIFFICULTY[difficulty].get(theme)
