"""version: show versions of webcmd, Python and the libraries it runs on."""

from __future__ import annotations

import platform
from importlib.metadata import PackageNotFoundError, version

from ..base import Command
from ..scaffold import console

DISTRIBUTIONS = ("webcmd", "click", "rich", "jinja2", "python-dotenv")


def _version(dist: str) -> str:
    try:
        return version(dist)
    except PackageNotFoundError:
        return "n/a"


class Version(Command):
    description = "Show versions of installed modules."
    usage = "usage: webcmd version\n"

    def run(self, *args: str) -> int:
        console.print("CORE")
        console.print(f"  Python  ({platform.python_version()}, {platform.system()})", highlight=False)
        width = max(len(d) for d in DISTRIBUTIONS)
        for dist in DISTRIBUTIONS:
            console.print(f"  {dist.ljust(width)}  ({_version(dist)})", highlight=False)
        return 0
