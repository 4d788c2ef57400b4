"""CLI entry point: forward every argument to the command runner."""

from __future__ import annotations

import sys

import click
from rich.console import Console

from .commands import CommandRunner
from .core.config import load_config
from .exceptions import MissingCommandError, WebcmdError

console = Console(stderr=True)


@click.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def _click_main(args: tuple[str, ...]):
    config = load_config()
    try:
        result = CommandRunner(config).run(*args)
    except MissingCommandError as e:
        console.print(f"error: {e}", style="bold", markup=False, highlight=False, soft_wrap=True)
        sys.exit(127)
    except WebcmdError as e:
        console.print(f"error: {e}", style="bold", markup=False, highlight=False, soft_wrap=True)
        if config.verbose:
            console.print_exception()
        sys.exit(1)

    if isinstance(result, int) and not isinstance(result, bool) and result:
        sys.exit(result)


def main():
    _click_main()


if __name__ == "__main__":
    main()
