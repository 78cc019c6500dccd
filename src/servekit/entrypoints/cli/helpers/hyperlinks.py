"""OSC-8 hyperlink utilities for the servekit CLI.

Detects whether the active text stream supports OSC-8 terminal hyperlinks and
renders a URL as a clickable link, falling back to plain text when unsupported.
"""

import os
import sys
from typing import TextIO

_OSC8_TERMINALS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether the target stream supports OSC-8 hyperlinks.

    Args:
        stream: File-like text stream to probe; defaults to ``sys.stdout``.

    Returns:
        bool: ``False`` for non-TTY streams; otherwise ``True`` only for an
        allowlist of terminals (VS Code, iTerm2, WezTerm, Kitty, Windows
        Terminal, VTE-based and a few others).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    return bool(
        (os.getenv("TERM_PROGRAM") or "").lower() in _OSC8_TERMINALS
        or os.getenv("WT_SESSION")  # Windows Terminal
        or os.getenv("VTE_VERSION")  # GNOME Terminal, Tilix, etc.
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, text: str | None = None) -> str:
    """Return *url* as an OSC-8 hyperlink, or as plain text when unsupported.

    Args:
        url: Target URL.
        text: Visible label; defaults to the URL itself.

    Returns:
        str: The label wrapped in BEL-terminated OSC-8 sequences when
        supported, otherwise the plain URL.
    """
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{text or url}\x1b]8;;\x07"
