"""statwatch Console - Themed console singleton for alert output."""

from typing import Optional
from rich.console import Console as RichConsole
from .theme import STATWATCH_THEME


class StatwatchConsole:
    """Themed stdout console. Lines are printed verbatim: no markup, no highlighting."""

    _instance: Optional['StatwatchConsole'] = None

    def __new__(cls) -> 'StatwatchConsole':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._console = RichConsole(theme=STATWATCH_THEME, soft_wrap=True)
        return cls._instance

    def alert(self, message: str) -> None:
        self._line(message, "alert")

    def fatal(self, message: str) -> None:
        self._line(message, "fatal")

    def _line(self, message: str, style: str) -> None:
        self._console.print(message, style=style, markup=False, highlight=False)


console = StatwatchConsole()
