"""Terminal message helpers for the servekit CLI.

Messages write to stderr so stdout can remain machine-readable, and fall back
from emoji to ASCII markers on terminals that cannot encode them.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(emoji: str, fallback: str) -> str:
    """Return *emoji* if stderr can display it, else the ASCII *fallback*.

    Example:
        ``glyph("✅", "[OK]")``
    """
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    click.secho(f"{glyph('⚠️', '[!]')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr."""
    click.secho(f"{glyph('✅', '[OK]')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr.

    Example:
        ``❌  Missing dependency 'Jinja2'.``
    """
    click.secho(f"{glyph('❌', '[X]')}  {msg}", fg="red", bold=True, err=True)
