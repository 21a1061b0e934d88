"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', 'Arial', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 2px solid {ColorPalette.ACCENT.get(theme)};
                border-radius: 12px;
                padding: 8px 16px;
            }}
            QPushButton:hover:enabled {{
                background-color: {ColorPalette.ACCENT.get(theme)};
                color: {ColorPalette.ACCENT_TEXT.get(theme)};
            }}
            QProgressBar {{
                background-color: {ColorPalette.BUTTON_BG.get(theme)};
                border: 1px solid {ColorPalette.ACCENT.get(theme)};
                border-radius: 6px;
                text-align: center;
                font-weight: bold;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.ACCENT.get(theme)};
                border-radius: 6px;
            }}
        """

    @staticmethod
    def get_option_button_style(
        font_size: int,
        background: str | None = None,
        foreground: str | None = None,
    ) -> str:
        style = f"font-size: {font_size}pt;"
        if background is not None:
            style += f" background-color: {background};"
        if foreground is not None:
            style += f" color: {foreground};"
        return style

    @staticmethod
    def get_timer_label_style(font_size: int, warning: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.TIMER_WARNING.get(theme) if warning else ColorPalette.ACCENT.get(theme)
        return (
            f"font-size: {font_size}pt; font-weight: bold; color: {color};"
            f" border: 2px solid {ColorPalette.ACCENT.get(theme)}; border-radius: 10px;"
            " padding: 4px 12px;"
        )

    @staticmethod
    def get_difficulty_label_style(color: str, font_size: int) -> str:
        return f"font-size: {font_size}pt; font-weight: bold; color: {color};"
