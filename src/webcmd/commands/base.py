"""Command: base class every command implementation derives from."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .scaffold import Scaffolder, console


class Command(Scaffolder, ABC):
    """A runnable command.

    Subclasses live in a namespace package, one per module, and are named
    after the module in CamelCase (``generate_app.py`` -> ``GenerateApp``).
    ``description`` is shown in the command list and ``usage`` by ``help``.
    """

    description: str = "No description."
    usage: str = "usage: webcmd\n"

    @abstractmethod
    def run(self, *args: str) -> Any: ...

    def help(self) -> int:
        console.print(self.usage, end="", markup=False, highlight=False, soft_wrap=True)
        return 0
