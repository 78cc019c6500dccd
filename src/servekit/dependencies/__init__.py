"""Optional dependency table and presence checks."""

from .cache import DependencyPresenceCache
from .catalog import (
    OptionalDependencies,
    OptionalDependency,
    lookup_dependency,
    missing_dependency_message,
)
from .probe import marker_exists
from .registry import (
    DependencyRegistry,
    default_registry,
    dependency_is_present,
    ensure_dependency_present,
)

__all__ = [
    "DependencyPresenceCache",
    "DependencyRegistry",
    "OptionalDependencies",
    "OptionalDependency",
    "default_registry",
    "dependency_is_present",
    "ensure_dependency_present",
    "lookup_dependency",
    "marker_exists",
    "missing_dependency_message",
]
