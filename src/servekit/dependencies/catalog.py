"""The table of optional dependencies servekit knows how to check for.

Each entry names a library that some framework feature needs but that is not
installed with servekit itself. The coordinates are only used to render the
installation hint shown when the library turns out to be missing. Adding an
optional dependency means adding a member to :class:`OptionalDependencies`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from textwrap import dedent

from servekit.errors import UnknownDependencyError

__all__ = [
    "OptionalDependency",
    "OptionalDependencies",
    "lookup_dependency",
    "missing_dependency_message",
]

PACKAGE_INDEX_URL = "https://pypi.org/project/{artifact_id}/"
RULE = "-" * 67


@dataclass(frozen=True)
class OptionalDependency:
    """Static metadata describing an optional library.

    Attributes:
        display_name: Human-readable name.
        test_marker: Importable identifier (module path, or ``module:attribute``)
            whose resolution proves the library is installed.
        group_id: The servekit extra that pulls the library in.
        artifact_id: Distribution name on the package index.
        version: Recommended minimum version.
    """

    display_name: str
    test_marker: str
    group_id: str
    artifact_id: str
    version: str


class OptionalDependencies(Enum):
    """Optional libraries used by framework features."""

    JINJA2 = OptionalDependency("Jinja2", "jinja2:Environment", "templates", "Jinja2", "3.1.4")
    MAKO = OptionalDependency("Mako", "mako.template:Template", "templates", "Mako", "1.3.5")
    CHEVRON = OptionalDependency("Chevron", "chevron", "templates", "chevron", "0.14.0")
    MARKDOWN = OptionalDependency("Markdown", "markdown", "rendering", "Markdown", "3.7")
    COMMONMARK = OptionalDependency("markdown-it-py", "markdown_it:MarkdownIt", "rendering", "markdown-it-py", "3.0.0")  # fmt: skip # pylint: disable=line-too-long
    ORJSON = OptionalDependency("orjson", "orjson", "json", "orjson", "3.10.7")
    MSGPACK = OptionalDependency("MessagePack", "msgpack", "json", "msgpack", "1.1.0")
    BROTLI = OptionalDependency("Brotli", "brotli", "compression", "Brotli", "1.1.0")
    ZSTANDARD = OptionalDependency("zstandard", "zstandard", "compression", "zstandard", "0.23.0")  # fmt: skip
    WEBSOCKETS = OptionalDependency("websockets", "websockets", "websockets", "websockets", "13.1")  # fmt: skip
    MULTIPART = OptionalDependency("python-multipart", "multipart", "forms", "python-multipart", "0.0.12")  # fmt: skip # pylint: disable=line-too-long

    @property
    def dependency(self) -> OptionalDependency:
        """The wrapped :class:`OptionalDependency`."""
        return self.value


def lookup_dependency(name: str) -> OptionalDependency:
    """Find a dependency by member name or display name, case-insensitively.

    Args:
        name: e.g. ``"jinja2"``, ``"JINJA2"`` or ``"python-multipart"``.

    Returns:
        The matching :class:`OptionalDependency`.

    Raises:
        UnknownDependencyError: If no table entry matches.
    """
    wanted = name.strip().lower()
    for member in OptionalDependencies:
        if wanted in (member.name.lower(), member.value.display_name.lower()):
            return member.value
    raise UnknownDependencyError(name)


def missing_dependency_message(dependency: OptionalDependency) -> str:
    """Render the installation hint for a missing dependency.

    Args:
        dependency: The dependency that could not be found.

    Returns:
        A framed, multi-line message naming the dependency and showing how to
        add it with pip or in ``pyproject.toml``.
    """
    requirement = f"{dependency.artifact_id}>={dependency.version}"
    body = dedent(
        f"""\
        Missing dependency '{dependency.display_name}'. Add the dependency.

        pip:
        pip install "{requirement}"

        pyproject.toml:
        dependencies = ["{requirement}"]

        or install the servekit extra:
        pip install "servekit[{dependency.group_id}]"

        Find the latest version here:
        {PACKAGE_INDEX_URL.format(artifact_id=dependency.artifact_id)}"""
    )
    return f"\n{RULE}\n{body}\n{RULE}"
