"""Most-specific lookup of values registered against exception types.

Given a mapping from exception type to handler and a raised exception, the
applicable handler is the one registered for the nearest type on the walk
from the exception's exact type toward the root of the hierarchy.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import TypeVar

__all__ = ["ancestors", "find_by_class"]

V = TypeVar("V")

ParentOf = Callable[[type], type | None]


def ancestors(exc_type: type, parent_of: ParentOf | None = None) -> Iterator[type]:
    """Yield *exc_type* followed by its ancestors, most specific first.

    Args:
        exc_type: The type to start from.
        parent_of: Optional parent relation returning ``None`` at the root.
            When omitted the type's method resolution order is used.

    Yields:
        type: *exc_type*, then each ancestor in turn.
    """
    if parent_of is None:
        yield from exc_type.__mro__
        return
    current: type | None = exc_type
    while current is not None:
        yield current
        current = parent_of(current)


def find_by_class(
    registry: Mapping[type, V],
    exception: BaseException,
    parent_of: ParentOf | None = None,
) -> V | None:
    """Return the value registered for the most specific type of *exception*.

    The exact runtime type always wins over any ancestor; otherwise the first
    registered ancestor met on the way up is returned.

    Args:
        registry: Mapping from exception type to value. Only read.
        exception: The raised exception.
        parent_of: Optional explicit parent relation (see :func:`ancestors`).

    Returns:
        The registered value, or ``None`` if no type on the chain is registered.
    """
    for candidate in ancestors(type(exception), parent_of):
        if candidate in registry:
            return registry[candidate]
    return None
