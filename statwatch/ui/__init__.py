"""statwatch UI - terminal output components."""

from .console import console, StatwatchConsole
from .theme import COLORS, STATWATCH_THEME

__all__ = ["console", "StatwatchConsole", "COLORS", "STATWATCH_THEME"]
