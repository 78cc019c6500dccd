"""Small diagnostic commands: path normalization, body checksums, banner."""

from __future__ import annotations

import io
from pathlib import Path

import click
import click_extra as clickx

from servekit.banner import DOCS_URL, banner_text, version_line
from servekit.utils.checksum import checksum_and_reset
from servekit.utils.paths import normalize_context_path, prefix_context_path

from .helpers import hyperlink


@click.group(cls=clickx.ExtraGroup)
def paths() -> None:
    """Context-path commands."""


@paths.command()
@click.argument("path", default="")
def normalize(path: str) -> None:
    """Print the normalized form of a context PATH."""
    click.echo(normalize_context_path(path))


@paths.command()
@click.argument("context_path")
@click.argument("path")
def prefix(context_path: str, path: str) -> None:
    """Print PATH prefixed with CONTEXT_PATH."""
    click.echo(prefix_context_path(context_path, path))


@click.command()
@click.argument(
    "file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
def checksum(file: Path) -> None:
    """Print the Adler-32 checksum of FILE, as used for response ETags."""
    click.echo(checksum_and_reset(io.BytesIO(file.read_bytes())))


@click.command()
def banner() -> None:
    """Print the startup banner and version line."""
    click.echo(banner_text().rstrip("\n"))
    click.echo(f"          {hyperlink(DOCS_URL)}")
    if line := version_line():
        click.echo(line)
