"""Resource and file URL lookup."""

from importlib.resources import files
from pathlib import Path


def get_resource_url(path: str, package: str = "servekit") -> str | None:
    """Return a ``file:`` URL for a resource packaged inside *package*.

    Args:
        path: Slash-separated resource path relative to the package root,
            e.g. ``"resources/banner.txt"``.
        package: Importable package that holds the resource.

    Returns:
        str | None: The URL, or None if the package or resource cannot be
        found, or the resource does not live on the file system (e.g. a
        zipped package).
    """
    try:
        resource = files(package).joinpath(*path.strip("/").split("/"))
    except (ModuleNotFoundError, TypeError, ValueError):
        return None
    if not resource.is_file() or not isinstance(resource, Path):
        return None
    return resource.resolve().as_uri()


def get_file_url(path: str | Path) -> str | None:
    """Return a ``file:`` URL for *path* if it exists on disk, else None."""
    candidate = Path(path)
    if not candidate.exists():
        return None
    return candidate.resolve().as_uri()
