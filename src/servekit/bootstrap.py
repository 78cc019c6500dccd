"""Bootstrap the dependency registry and exception mapper for an application."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from servekit import config
from servekit.banner import log_banner, log_version
from servekit.dependencies import DependencyRegistry, OptionalDependency
from servekit.exception_mapper import ExceptionHandler, ExceptionMapper

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring."""

    dependency_registry: DependencyRegistry
    exception_mapper: ExceptionMapper


def run_startup_checks(
    registry: DependencyRegistry, dependencies: Iterable[OptionalDependency]
) -> None:
    """Verify each dependency, raising ConfigurationError on the first missing one."""
    for dependency in dependencies:
        registry.ensure_present(dependency, startup_check=True)
        logger.debug("Startup check passed for %s", dependency.display_name)


def bootstrap(
    exception_handlers: Mapping[type[BaseException], ExceptionHandler] | None = None,
    *,
    registry: DependencyRegistry | None = None,
    show_banner: bool | None = None,
    startup_checks: Iterable[OptionalDependency] | None = None,
) -> AppContainer:
    """Wire an application and run its startup checks.

    Args:
        exception_handlers: Mapping of exception types to handlers.
        registry: Dependency registry to use; a fresh one when omitted.
        show_banner: Overrides ``SERVEKIT_SHOW_BANNER``.
        startup_checks: Overrides ``SERVEKIT_STARTUP_CHECKS``.

    Returns:
        AppContainer: The wired components.

    Raises:
        ConfigurationError: If a startup-checked dependency is missing or a
            configured dependency name is unknown.
    """
    registry = registry or DependencyRegistry()
    if show_banner is None:
        show_banner = config.show_banner()
    if startup_checks is None:
        startup_checks = config.get_startup_checks()

    log_banner(show_banner)
    log_version()
    run_startup_checks(registry, startup_checks)

    return AppContainer(
        dependency_registry=registry,
        exception_mapper=ExceptionMapper(dict(exception_handlers or {})),
    )
