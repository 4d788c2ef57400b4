"""Shared fixtures: throwaway packages importable for the duration of a test."""

import importlib
import sys
import textwrap

import pytest

COMMAND_SOURCE = """\
from webcmd.commands import Command


class {cls}(Command):
    description = "{description}"
    usage = "usage: webcmd {name} ARGS\\n"

    def run(self, *args):
        return ("{origin}", args, self)
"""


def command_source(name: str, cls: str, origin: str, description: str = "") -> str:
    return COMMAND_SOURCE.format(
        name=name, cls=cls, origin=origin, description=description or f"{cls} description."
    )


@pytest.fixture
def make_package(tmp_path, monkeypatch):
    """Create ``make_package("pkg.sub", {"mod.py": source})`` under a temp sys.path entry.

    ``str`` sources are dedented; ``bytes`` are written as is (line endings
    included). Every module imported from the created top-level packages is
    dropped from ``sys.modules`` afterwards.
    """
    root = tmp_path / "site"
    root.mkdir()
    monkeypatch.syspath_prepend(str(root))
    tops: set[str] = set()

    def _make(package: str, files: dict | None = None):
        pkg_dir = root
        for part in package.split("."):
            pkg_dir = pkg_dir / part
            pkg_dir.mkdir(exist_ok=True)
            init = pkg_dir / "__init__.py"
            if not init.exists():
                init.write_text("")
        for fname, source in (files or {}).items():
            path = pkg_dir / fname
            if isinstance(source, bytes):
                path.write_bytes(source)
            else:
                path.write_text(textwrap.dedent(source))
        tops.add(package.split(".")[0])
        importlib.invalidate_caches()
        return pkg_dir

    yield _make

    for name in list(sys.modules):
        if name.split(".")[0] in tops:
            del sys.modules[name]
