"""CommandRegistry: resolve command names across ordered namespace packages."""

from __future__ import annotations

import importlib
import inspect
import pkgutil
from dataclasses import dataclass
from types import ModuleType

from ..core.utils import camelize
from ..exceptions import MissingCommandError, ModuleLoadError, NotACommandError
from .base import Command


@dataclass(frozen=True)
class CommandDescriptor:
    name: str
    implementation: type[Command]


def _is_missing(module: str, exc: ModuleNotFoundError) -> bool:
    """True when *exc* is about *module* itself (or a parent package)."""
    missing = exc.name or ""
    return bool(missing) and (module == missing or module.startswith(missing + "."))


def load_module(module: str) -> ModuleType | None:
    """Import *module*; None if it does not exist, ModuleLoadError if it breaks."""
    try:
        return importlib.import_module(module)
    except ModuleNotFoundError as e:
        if _is_missing(module, e):
            return None
        raise ModuleLoadError(module, e) from e
    except Exception as e:
        raise ModuleLoadError(module, e) from e


def command_class(module: ModuleType, attr: str) -> type[Command]:
    candidate = getattr(module, attr, None)
    if (
        not inspect.isclass(candidate)
        or not issubclass(candidate, Command)
        or inspect.isabstract(candidate)
    ):
        raise NotACommandError(module.__name__, attr)
    return candidate


class CommandRegistry:
    """Name-to-command resolution over an ordered list of namespaces.

    The first namespace providing a valid command wins, both for
    :meth:`resolve` and when de-duplicating :meth:`discover`.
    """

    def __init__(self, namespaces: list[str] | tuple[str, ...]):
        self.namespaces = list(namespaces)

    def resolve(self, name: str) -> type[Command]:
        attr = camelize(name)
        for namespace in self.namespaces:
            module = load_module(f"{namespace}.{name}")
            if module is None:
                continue
            try:
                return command_class(module, attr)
            except NotACommandError:
                continue
        raise MissingCommandError(name)

    def discover(self) -> list[CommandDescriptor]:
        """Every command found under the namespaces, in discovery order."""
        found: list[CommandDescriptor] = []
        seen: set[str] = set()
        for namespace in self.namespaces:
            package = load_module(namespace)
            if package is None or not hasattr(package, "__path__"):
                continue
            for info in pkgutil.iter_modules(package.__path__):
                if info.name.startswith("_"):
                    continue
                module = load_module(f"{namespace}.{info.name}")
                if module is None:
                    continue
                try:
                    impl = command_class(module, camelize(info.name))
                except NotACommandError:
                    continue
                name = info.name
                if name in seen:
                    continue
                seen.add(name)
                found.append(CommandDescriptor(name, impl))
        return found

    def list(self, **kwargs) -> list[tuple[str, str]]:
        """``(name, description)`` pairs; each command is instantiated once."""
        return [(d.name, d.implementation(**kwargs).description) for d in self.discover()]
