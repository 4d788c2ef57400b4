"""Exception hierarchy: resource parsing, command loading, file operations."""

from __future__ import annotations

from pathlib import Path


class WebcmdError(Exception):
    """Base class for every error raised by webcmd."""


class MalformedResourceError(WebcmdError):
    def __init__(self, unit: str, name: str, reason: str):
        self.unit = unit
        self.name = name
        super().__init__(f'Malformed resource "{name}" in {unit}: {reason}')


class MissingResourceError(WebcmdError, LookupError):
    def __init__(self, unit: str, name: str):
        self.unit = unit
        self.name = name
        super().__init__(f'No embedded resource "{name}" in {unit}')


class ModuleLoadError(WebcmdError):
    """A candidate module exists but failed while importing."""

    def __init__(self, module: str, cause: BaseException):
        self.module = module
        self.cause = cause
        super().__init__(f"Can't load {module}: {type(cause).__name__}: {cause}")


class MissingCommandError(WebcmdError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Command "{name}" missing, maybe you need to install it?')


class NotACommandError(WebcmdError):
    """Internal signal: module loaded but exposes no runnable command class."""

    def __init__(self, module: str, attr: str):
        self.module = module
        self.attr = attr
        super().__init__(f"{module}.{attr} is not a command")


class FileOperationError(WebcmdError, OSError):
    def __init__(self, action: str, path: Path | str, cause: OSError):
        self.action = action
        self.path = Path(path)
        super().__init__(f'Can\'t {action} "{path}": {cause.strerror or cause}')


class AppLoadError(WebcmdError):
    def __init__(self, spec: str | None, reason: str):
        self.spec = spec
        super().__init__(f"Can't load application {spec!r}: {reason}")
