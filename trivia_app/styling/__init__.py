"""Styling module for Triviamo."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
