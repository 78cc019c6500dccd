"""Configuration utilities for servekit.

This module centralizes small helpers and constants related to application
configuration. Settings are read from the environment.
"""

import os
import re

from servekit.dependencies import OptionalDependency, lookup_dependency

SHOW_BANNER_ENV = "SERVEKIT_SHOW_BANNER"  # pragma: no mutate
STARTUP_CHECKS_ENV = "SERVEKIT_STARTUP_CHECKS"  # pragma: no mutate

_FALSY = {"0", "false", "no", "off"}


def show_banner() -> bool:
    """Whether the startup banner should be logged.

    Returns:
        False if ``SERVEKIT_SHOW_BANNER`` is set to a falsy value
        (``0``, ``false``, ``no``, ``off``); True otherwise.
    """
    value = os.environ.get(SHOW_BANNER_ENV, "")
    return value.strip().lower() not in _FALSY


def get_startup_checks() -> list[OptionalDependency]:
    """Dependencies to verify while the application boots.

    Reads ``SERVEKIT_STARTUP_CHECKS``, a comma/space separated list of
    dependency names (e.g. ``"jinja2, orjson"``).

    Returns:
        The named dependencies, in order, without duplicates.

    Raises:
        UnknownDependencyError: If a name is not in the dependency table.
    """
    raw = os.environ.get(STARTUP_CHECKS_ENV, "")
    checks: list[OptionalDependency] = []
    for name in (s for s in re.split(r"[,\s]+", raw) if s):
        dependency = lookup_dependency(name)
        if dependency not in checks:
            checks.append(dependency)
    return checks
