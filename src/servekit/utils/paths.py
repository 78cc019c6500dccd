"""Context-path helpers for route registration."""

import re

WILDCARD = "*"

_SLASH_RUN = re.compile(r"/{2,}")


def normalize_context_path(context_path: str) -> str:
    """Normalize an application context path.

    A leading slash is added, runs of slashes are collapsed and a single
    trailing slash is removed. The empty string normalizes to ``"/"``.

    Examples:
        >>> normalize_context_path("a//b///c/")
        '/a/b/c'
        >>> normalize_context_path("")
        '/'
    """
    normalized = _SLASH_RUN.sub("/", f"/{context_path}")
    if normalized != "/" and normalized.endswith("/"):
        normalized = normalized[:-1]
    return normalized


def prefix_context_path(context_path: str, path: str) -> str:
    """Join *path* onto *context_path*, collapsing runs of slashes.

    The wildcard path ``"*"`` is returned unchanged. Unlike
    :func:`normalize_context_path` a trailing slash is kept.

    Examples:
        >>> prefix_context_path("/api/", "//users")
        '/api/users'
        >>> prefix_context_path("/api", "*")
        '*'
    """
    if path == WILDCARD:
        return path
    return _SLASH_RUN.sub("/", f"{context_path}/{path}")
