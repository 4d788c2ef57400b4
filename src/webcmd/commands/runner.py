"""CommandRunner: detect the environment, resolve a command and run it or list all."""

from __future__ import annotations

import importlib
import sys
from typing import Any

from rich.console import Console

from ..core.config import Config, load_config
from ..core.env import detect
from ..core.utils import is_command_name
from ..exceptions import AppLoadError
from ..resources import ResourceStore, default_store
from .registry import CommandRegistry

console = Console()

MESSAGE = """\
usage: webcmd COMMAND [OPTIONS]

Tip: CGI, FastCGI and PSGI environments can be automatically detected very
     often and work without commands.

These commands are currently available:
"""

HINT = """
See 'webcmd help COMMAND' for more information on a specific command.
"""


def load_app(spec: str | None) -> Any:
    """Import the application object named by ``"package.module:attribute"``."""
    if not spec:
        raise AppLoadError(spec, "WEBCMD_APP is not set")
    module_name, _, attr = spec.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise AppLoadError(spec, str(e)) from e
    app = getattr(module, attr or "app", None)
    if app is None:
        raise AppLoadError(spec, f"{module_name} has no attribute {attr or 'app'!r}")
    return app


class CommandRunner:
    """Entry point for command line dispatch.

    ``run`` walks: application loader short-circuit, environment detection,
    resolution (``help NAME`` shows the command's usage instead of running
    it), and finally the command list when no usable name is left.
    """

    message: str = MESSAGE
    hint: str = HINT

    def __init__(
        self,
        config: Config | None = None,
        registry: CommandRegistry | None = None,
        store: ResourceStore | None = None,
    ):
        self.config = config or load_config()
        self.registry = registry or CommandRegistry(self.config.namespaces)
        self.store = store or default_store()

    def _command_kwargs(self) -> dict:
        return {"quiet": self.config.quiet, "cwd": self.config.cwd, "resources": self.store}

    def run(self, name: str | None = None, *args: str) -> Any:
        args_list = list(args)

        if self.config.app_loader:
            return load_app(self.config.app)

        if not self.config.no_detect:
            name = detect(name)

        if is_command_name(name) and (name != "help" or args_list):
            show_help = name == "help"
            if show_help:
                name = args_list.pop(0)
            show_help = show_help or self.config.force_help

            if is_command_name(name):
                impl = self.registry.resolve(name)
                command = impl(**self._command_kwargs())
                return command.help() if show_help else command.run(*args_list)

        if self.config.harness_active:
            return self

        self.print_commands()
        return self

    def print_commands(self) -> None:
        commands = self.registry.list(**self._command_kwargs())
        width = max((len(name) for name, _ in commands), default=0)

        console.print(self.message, end="", markup=False, highlight=False, soft_wrap=True)
        for name, description in commands:
            line = f"  {name.ljust(width)}   {description.rstrip()}"
            console.print(line, markup=False, highlight=False, soft_wrap=True)
        console.print(self.hint, end="", markup=False, highlight=False, soft_wrap=True)

    def start(self, argv: list[str] | None = None) -> Any:
        argv = list(sys.argv[1:] if argv is None else argv)
        return self.run(*argv)
