"""Core: configuration, environment detection, name transforms."""

from .config import Config, load_config
from .env import EnvironmentGuess, detect
from .utils import (
    COMMAND_NAME_RE,
    camelize,
    class_to_file,
    class_to_path,
    decamelize,
    is_command_name,
)

__all__ = [
    "COMMAND_NAME_RE",
    "Config",
    "EnvironmentGuess",
    "camelize",
    "class_to_file",
    "class_to_path",
    "decamelize",
    "detect",
    "is_command_name",
    "load_config",
]
