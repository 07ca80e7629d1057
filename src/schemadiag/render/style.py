"""Terminal styling for diagnostic markers, backed by rich."""

from __future__ import annotations

import io

from rich.console import Console
from rich.text import Text

ERROR_STYLE = "bright_red"


def paint(text: str, style: str = ERROR_STYLE) -> str:
    """Return ``text`` wrapped in the ANSI escapes for ``style``."""
    console = Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system="standard",
        no_color=False,
        highlight=False,
        width=max(len(text), 1) + 1,
    )
    with console.capture() as capture:
        console.print(Text(text, style=style), end="")
    return capture.get()
