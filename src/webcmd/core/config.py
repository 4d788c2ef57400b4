"""Configuration: env flags, command namespaces, application loader."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_NAMESPACES = ("webcmd.commands.builtin",)

_FALSE_VALUES = ("", "0", "false", "no", "off")


def env_flag(name: str) -> bool:
    value = os.getenv(name)
    if value is None:
        return False
    return value.strip().lower() not in _FALSE_VALUES


@dataclass
class Config:
    namespaces: list[str] = field(default_factory=lambda: list(DEFAULT_NAMESPACES))
    cwd: Path | None = None  # None follows the live working directory
    app: str | None = None  # "module:attribute" returned by the app loader
    no_detect: bool = False
    force_help: bool = False
    app_loader: bool = False
    harness_active: bool = False
    quiet: bool = False
    verbose: bool = False


def _split_namespaces(raw: str) -> list[str]:
    return [ns.strip() for ns in raw.split(",") if ns.strip()]


def load_config(
    namespaces: list[str] | None = None,
    verbose: bool = False,
) -> Config:
    """Load config with priority: call args > env > .env > defaults."""
    load_dotenv()

    config = Config()
    config.verbose = verbose or env_flag("WEBCMD_VERBOSE")

    if env_ns := os.getenv("WEBCMD_NAMESPACES"):
        config.namespaces = _split_namespaces(env_ns)
    if app := os.getenv("WEBCMD_APP"):
        config.app = app

    config.no_detect = env_flag("WEBCMD_NO_DETECT")
    config.force_help = env_flag("WEBCMD_HELP")
    config.app_loader = env_flag("WEBCMD_APP_LOADER")
    config.harness_active = env_flag("WEBCMD_HARNESS_ACTIVE")
    config.quiet = env_flag("WEBCMD_QUIET")

    if namespaces:
        config.namespaces = list(namespaces)

    return config
