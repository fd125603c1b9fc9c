import io
from collections.abc import Iterator

import pytest
from rich.console import Console

from statwatch.ui import STATWATCH_THEME, console


@pytest.fixture
def console_output(monkeypatch) -> Iterator[io.StringIO]:
    """Redirect the themed console to a plain-text buffer."""
    buf = io.StringIO()
    rich_console = Console(
        file=buf, theme=STATWATCH_THEME, color_system=None, soft_wrap=True
    )
    monkeypatch.setattr(console, "_console", rich_console)
    yield buf
