"""Presence checks for optional dependencies.

Features that need an optional library call :func:`ensure_dependency_present`
the first time they are exercised instead of checking every library at boot.
Callers that want a library verified before any request is served pass
``startup_check=True`` and get a :class:`~servekit.errors.ConfigurationError`
instead of a request-scoped :class:`~servekit.errors.RuntimeUnavailableFeature`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from servekit.errors import ConfigurationError, RuntimeUnavailableFeature

from .cache import DependencyPresenceCache
from .catalog import OptionalDependency, missing_dependency_message
from .probe import marker_exists

__all__ = [
    "DependencyRegistry",
    "default_registry",
    "dependency_is_present",
    "ensure_dependency_present",
]

logger = logging.getLogger(__name__)


class DependencyRegistry:
    """Checks optional dependencies and remembers the ones it has found.

    Args:
        cache: Presence cache owned by this registry. A new, empty cache is
            created when omitted.
        probe: Callable deciding whether a marker resolves in the running
            interpreter. Must not raise; defaults to
            :func:`~servekit.dependencies.probe.marker_exists`.
    """

    def __init__(
        self,
        cache: DependencyPresenceCache | None = None,
        probe: Callable[[str], bool] = marker_exists,
    ) -> None:
        self.cache = cache if cache is not None else DependencyPresenceCache()
        self._probe = probe

    def _check(self, dependency: OptionalDependency) -> bool:
        marker = dependency.test_marker
        if self.cache.is_known_present(marker):
            return True
        try:
            found = bool(self._probe(marker))
        except Exception:  # pylint: disable=broad-except
            logger.debug("Probe raised for marker %s", marker, exc_info=True)
            found = False
        if found:
            self.cache.mark_present(marker)
        return found

    def is_present(self, dependency: OptionalDependency) -> bool:
        """Return whether *dependency* is installed. Never raises."""
        return self._check(dependency)

    def ensure_present(
        self, dependency: OptionalDependency, startup_check: bool = False
    ) -> None:
        """Make sure *dependency* is installed.

        Args:
            dependency: The optional dependency a feature needs.
            startup_check: True when called while the application boots.

        Raises:
            ConfigurationError: If the dependency is missing and
                ``startup_check`` is True.
            RuntimeUnavailableFeature: If the dependency is missing and
                ``startup_check`` is False. The installation hint is also
                logged as a warning.
        """
        if self._check(dependency):
            return
        message = missing_dependency_message(dependency)
        if startup_check:
            raise ConfigurationError(message)
        logger.warning(message)
        raise RuntimeUnavailableFeature(message)


# Created once per process; never torn down.
default_registry = DependencyRegistry()


def dependency_is_present(dependency: OptionalDependency) -> bool:
    """Check *dependency* against the process-wide registry."""
    return default_registry.is_present(dependency)


def ensure_dependency_present(
    dependency: OptionalDependency, startup_check: bool = False
) -> None:
    """Ensure *dependency* via the process-wide registry.

    See :meth:`DependencyRegistry.ensure_present`.
    """
    default_registry.ensure_present(dependency, startup_check=startup_check)
