"""Startup banner and version logging."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from importlib.metadata import PackageNotFoundError, version
from importlib.resources import files

import servekit

from .logging import startup

logger = logging.getLogger(__name__)

DOCS_URL = "https://servekit.readthedocs.io/"
STALE_AFTER = timedelta(days=90)


def banner_text() -> str:
    """Return the ASCII banner packaged with servekit."""
    return files("servekit").joinpath("resources", "banner.txt").read_text("utf-8")


def log_banner(show_banner: bool, log: logging.Logger | None = None) -> None:
    """Log the ASCII banner and documentation link when *show_banner* is set."""
    if not show_banner:
        return
    startup(log or logger, "\n%s\n          %s\n", banner_text().rstrip("\n"), DOCS_URL)


def installed_version() -> str:
    """Return the installed distribution version, falling back to ``__version__``."""
    try:
        return version("servekit")
    except PackageNotFoundError:
        return servekit.__version__


def format_build_time(build_time: str, now: datetime | None = None) -> str | None:
    """Render a release timestamp for the version line.

    Args:
        build_time: ISO 8601 timestamp, e.g. ``"2026-09-14T09:30:00Z"``.
        now: Current time (naive values are taken as UTC); defaults to the
            wall clock.

    Returns:
        ``"September 14, 2026"``, followed by an age notice when the release
        is more than 90 days old, or None if *build_time* cannot be parsed.
    """
    try:
        release = datetime.fromisoformat(build_time.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        logger.debug("Unparseable release time %r", build_time)
        return None
    if release.tzinfo is None:
        release = release.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    released = f"{release:%B} {release.day}, {release.year}"
    if now > release + STALE_AFTER:
        days_old = (now - release).days
        return (
            f"{released}. Your servekit version is {days_old} days old. "
            "Consider checking for a newer version."
        )
    return released


def version_line(now: datetime | None = None) -> str | None:
    """Return the "You are running servekit ..." line, or None if the release date is unknown."""
    released = format_build_time(servekit.__released__, now=now)
    if released is None:
        return None
    return f"You are running servekit {installed_version()} (released {released})."


def log_version(log: logging.Logger | None = None, now: datetime | None = None) -> None:
    """Log the running servekit version and its release date."""
    if line := version_line(now=now):
        startup(log or logger, line)
