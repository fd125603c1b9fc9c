"""
statwatch UI Theme - Color constants and styling definitions.
"""

from rich.style import Style
from rich.theme import Theme

COLORS = {
    "alert": "#eab308",
    "fatal": "#ef4444",
}

STATWATCH_THEME = Theme({
    "alert": Style(color=COLORS["alert"], bold=True),
    "fatal": Style(color=COLORS["fatal"], bold=True),
})
