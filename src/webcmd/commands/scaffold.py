"""Scaffolder: relative paths, directories, files, modes and template rendering."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from types import ModuleType

from jinja2 import Environment
from rich.console import Console

from ..exceptions import FileOperationError, MissingResourceError
from ..resources import ResourceStore, default_store, unit_id

console = Console()


def default_renderer() -> Environment:
    return Environment(keep_trailing_newline=True)


class Scaffolder:
    """File generation helpers shared by every command.

    Paths given to the ``*_rel_*`` variants are UNIX style and resolved
    against ``cwd`` (the live working directory unless one was given).
    Status lines are printed unless ``quiet`` is set.
    """

    def __init__(
        self,
        quiet: bool = False,
        cwd: Path | None = None,
        resources: ResourceStore | None = None,
        renderer: Environment | None = None,
    ):
        self.quiet = quiet
        self._cwd = cwd
        self.resources = resources or default_store()
        self.renderer = renderer or default_renderer()

    @property
    def cwd(self) -> Path:
        return self._cwd or Path.cwd()

    def _status(self, action: str, path: Path | str, extra: str = "") -> None:
        if self.quiet:
            return
        line = f"  [{action}] {path}"
        if extra:
            line += f" {extra}"
        console.print(line, style="dim", markup=False, highlight=False, soft_wrap=True)

    # ── Paths ────────────────────────────────────────────────────────

    def rel_dir(self, path: str) -> Path:
        return self.cwd.joinpath(*path.split("/"))

    def rel_file(self, path: str) -> Path:
        return self.cwd.joinpath(*path.split("/"))

    # ── File system ──────────────────────────────────────────────────

    def create_dir(self, path: Path | str) -> Scaffolder:
        path = Path(path)
        if path.is_dir():
            self._status("exist", path)
            return self
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileOperationError("make directory", path, e) from e
        self._status("mkdir", path)
        return self

    def create_rel_dir(self, path: str) -> Scaffolder:
        return self.create_dir(self.rel_dir(path))

    def write_file(self, path: Path | str, data: str | bytes) -> Scaffolder:
        path = Path(path)
        self.create_dir(path.parent)
        if isinstance(data, str):
            data = data.encode("utf-8")
        try:
            with open(path, "wb", buffering=0) as f:
                f.write(data)
        except OSError as e:
            raise FileOperationError("open file", path, e) from e
        self._status("write", path)
        return self

    def write_rel_file(self, path: str, data: str | bytes) -> Scaffolder:
        return self.write_file(self.rel_file(path), data)

    def chmod_file(self, path: Path | str, mode: int) -> Scaffolder:
        try:
            os.chmod(path, mode)
        except OSError as e:
            raise FileOperationError("chmod path", path, e) from e
        self._status("chmod", path, f"{mode:o}")
        return self

    def chmod_rel_file(self, path: str, mode: int) -> Scaffolder:
        return self.chmod_file(self.rel_file(path), mode)

    # ── Embedded data ────────────────────────────────────────────────

    def get_all_data(self, unit: str | type | ModuleType | None = None) -> Mapping[str, bytes]:
        return self.resources.get_all(unit or type(self))

    def get_data(self, name: str, unit: str | type | ModuleType | None = None) -> bytes | None:
        return self.resources.get(unit or type(self), name)

    def render_data(self, name: str, unit: str | type | ModuleType | None = None, /, **variables) -> str:
        """Render embedded template *name* with jinja2."""
        data = self.get_data(name, unit)
        if data is None:
            raise MissingResourceError(unit_id(unit or type(self)), name)
        return self.renderer.from_string(data.decode("utf-8")).render(**variables)

    def render_to_file(
        self, name: str, path: Path | str, unit: str | type | ModuleType | None = None, /, **variables
    ) -> Scaffolder:
        return self.write_file(path, self.render_data(name, unit, **variables))

    def render_to_rel_file(
        self, name: str, path: str, unit: str | type | ModuleType | None = None, /, **variables
    ) -> Scaffolder:
        return self.render_to_file(name, self.rel_file(path), unit, **variables)
