"""Commands: namespace resolution, dispatch, scaffolding, built-in commands."""

from .base import Command
from .registry import CommandDescriptor, CommandRegistry
from .runner import CommandRunner, load_app
from .scaffold import Scaffolder

__all__ = [
    "Command",
    "CommandDescriptor",
    "CommandRegistry",
    "CommandRunner",
    "Scaffolder",
    "load_app",
]
