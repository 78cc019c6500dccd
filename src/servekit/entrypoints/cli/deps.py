"""servekit deps CLI: inspect optional dependencies.

Behavior
- ``deps list`` prints one line per known optional dependency on **stdout**.
- ``deps check`` runs startup-style checks; the installation hint for a
  missing dependency goes to **stderr** and the command exits non-zero.
"""

from __future__ import annotations

import click
import click_extra as clickx

from servekit.dependencies import (
    OptionalDependencies,
    OptionalDependency,
    default_registry,
    lookup_dependency,
)
from servekit.errors import ConfigurationError, UnknownDependencyError

from .helpers import error, success

registry = default_registry


def _resolve_names(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> list[OptionalDependency]:
    try:
        return [lookup_dependency(name) for name in value]
    except UnknownDependencyError as e:
        raise click.BadParameter(str(e)) from e


@click.group(cls=clickx.ExtraGroup)
def deps() -> None:
    """Optional dependency commands."""


@deps.command(name="list")
def list_() -> None:
    """List optional dependencies and whether they are installed."""
    for member in OptionalDependencies:
        dependency = member.dependency
        status = "present" if registry.is_present(dependency) else "missing"
        click.echo(
            f"{member.name.lower():<12} {dependency.display_name:<16} "
            f"{dependency.group_id:<12} {status}"
        )


@deps.command()
@click.argument("names", nargs=-1, required=True, callback=_resolve_names)
def check(names: list[OptionalDependency]) -> None:
    """Check that the named optional dependencies are installed."""
    missing = 0
    for dependency in names:
        try:
            registry.ensure_present(dependency, startup_check=True)
        except ConfigurationError as e:
            missing += 1
            error(f"{dependency.display_name} is not installed.")
            click.echo(str(e), err=True)
            continue
        success(f"{dependency.display_name} is installed.")
    if missing:
        raise click.ClickException(
            f"{missing} of {len(names)} optional dependencies missing."
        )
