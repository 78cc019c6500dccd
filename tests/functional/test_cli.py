"""Functional tests for the servekit CLI.

This suite drives the ``servekit`` command through Click's ``CliRunner``:
- help/version output and the "See Also" links;
- ``deps list`` / ``deps check`` against a registry with a scripted probe;
- ``paths``, ``checksum`` and ``banner`` diagnostics.

Notes:
- Every invocation passes ``--no-flight-recorder`` so nothing is written to
  the user log directory.
- The root logger is restored after each test since the CLI reconfigures it.
"""

from __future__ import annotations

import logging
import re
import zlib
from pathlib import Path

import pytest
from click.testing import CliRunner

import servekit
from servekit.dependencies import (
    DependencyRegistry,
    OptionalDependencies,
    default_registry,
)
from servekit.entrypoints.cli import deps as deps_cli
from servekit.entrypoints.cli import main
from tests.conftest import FakeProbe

# pylint: disable=magic-value-comparison, redefined-outer-name

ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def _normalize(s: str) -> str:
    """Return `s` with ANSI stripped and whitespace collapsed."""
    return re.sub(r"\s+", " ", ANSI_RE.sub("", s).strip())


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the CLI's root logger configuration."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def cli_probe(monkeypatch) -> FakeProbe:
    """Install a scripted probe behind the deps commands."""
    probe = FakeProbe()
    monkeypatch.setattr(deps_cli, "registry", DependencyRegistry(probe=probe))
    return probe


def invoke(*args: str):
    """Run ``servekit`` with the flight recorder disabled."""
    return CliRunner().invoke(main.servekit, ["--no-flight-recorder", *args])


class TestHelpAndVersion:
    """A new user looks for help."""

    @staticmethod
    def test_help_output():
        """--help shows the long help text, the commands and the links."""
        result = CliRunner().invoke(main.servekit, ["--help"])
        assert result.exit_code == 0
        text = _normalize(result.output)
        assert _normalize(main.HELP) in text
        for command in ("deps", "paths", "checksum", "banner"):
            assert command in text
        assert "https://servekit.readthedocs.io/" in result.output
        assert "https://github.com/servekit/servekit/issues" in result.output

    @staticmethod
    def test_version_output():
        """--version shows the package version."""
        result = CliRunner().invoke(main.servekit, ["--version"])
        assert result.exit_code == 0
        assert servekit.__version__ in result.output


class TestDeps:
    """An operator inspects optional dependencies."""

    @staticmethod
    def test_commands_share_the_process_registry():
        """The deps commands read and fill the process-wide presence cache."""
        assert deps_cli.registry is default_registry

    @staticmethod
    def test_list_shows_every_dependency(cli_probe: FakeProbe):
        """Every table entry is listed with its status."""
        cli_probe.answers[OptionalDependencies.ORJSON.dependency.test_marker] = [True]
        result = invoke("deps", "list")
        assert result.exit_code == 0, result.output
        lines = result.stdout.strip().splitlines()
        assert len(lines) == len(OptionalDependencies)
        statuses = {line.split()[0]: line.split()[-1] for line in lines}
        assert statuses["orjson"] == "present"
        assert statuses["jinja2"] == "missing"

    @staticmethod
    def test_check_present(cli_probe: FakeProbe):
        """Installed dependencies pass the check."""
        cli_probe.answers[OptionalDependencies.ORJSON.dependency.test_marker] = [True]
        result = invoke("deps", "check", "orjson")
        assert result.exit_code == 0, result.output
        assert "orjson is installed." in result.output

    @staticmethod
    def test_check_missing_prints_hint_and_fails(cli_probe: FakeProbe):
        """Missing dependencies print the install hint and exit non-zero."""
        cli_probe.answers[OptionalDependencies.ORJSON.dependency.test_marker] = [True]
        result = invoke("deps", "check", "orjson", "jinja2")
        assert result.exit_code == 1
        assert "Jinja2 is not installed." in result.output
        assert 'pip install "Jinja2>=3.1.4"' in result.output
        assert "1 of 2 optional dependencies missing." in result.output

    @staticmethod
    def test_check_unknown_name(cli_probe: FakeProbe):
        """Unknown names are a usage error."""
        result = invoke("deps", "check", "nope")
        assert result.exit_code == 2
        assert "Unknown optional dependency 'nope'" in result.output
        assert not cli_probe.calls


class TestTools:
    """Small diagnostics."""

    @staticmethod
    @pytest.mark.parametrize(
        ("args", "expected"),
        [
            (["paths", "normalize", "a//b///c/"], "/a/b/c"),
            (["paths", "normalize"], "/"),
            (["paths", "prefix", "/api/", "//users"], "/api/users"),
            (["paths", "prefix", "/api", "*"], "*"),
        ],
    )
    def test_paths(args: list[str], expected: str):
        """Path commands print the normalized or prefixed path."""
        result = invoke(*args)
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == expected

    @staticmethod
    def test_checksum(tmp_path: Path):
        """checksum prints the Adler-32 of the file's bytes."""
        body = b"<p>hello</p>"
        target = tmp_path / "body.html"
        target.write_bytes(body)
        result = invoke("checksum", str(target))
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == str(zlib.adler32(body))

    @staticmethod
    def test_banner():
        """banner prints the ASCII banner and the docs link."""
        result = invoke("banner")
        assert result.exit_code == 0, result.output
        assert "/____/" in result.stdout
        assert "https://servekit.readthedocs.io/" in result.stdout
        assert "You are running servekit" in result.stdout
