"""Name transforms: camelize, decamelize, class_to_file, class_to_path."""

from __future__ import annotations

import re

COMMAND_NAME_RE = re.compile(r"^[A-Za-z0-9_]+$")

_CLASS_SEP_RE = re.compile(r"::|\.")
_WORD_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def is_command_name(name: str | None) -> bool:
    return bool(name) and COMMAND_NAME_RE.match(name) is not None


def camelize(name: str) -> str:
    """snake_case -> CamelCase. Input that already starts uppercase is kept."""
    if not name or name[0].isupper():
        return name
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


def decamelize(name: str) -> str:
    """CamelCase -> snake_case.

    A boundary sits between a lowercase letter or digit and an uppercase
    letter, and before the last capital of an uppercase run that is followed
    by a lowercase letter, so ``HTTPServer`` becomes ``http_server``.
    Input not starting uppercase is returned unchanged.
    """
    if not name or not name[0].isupper():
        return name
    return _WORD_BOUNDARY_RE.sub("_", name).lower()


def class_to_file(class_name: str) -> str:
    """``Foo::Bar`` or ``Foo.Bar`` -> ``foo_bar``."""
    return decamelize(_CLASS_SEP_RE.sub("", class_name))


def class_to_path(class_name: str) -> str:
    """``Foo::Bar`` or ``Foo.Bar`` -> ``Foo/Bar.py``."""
    return "/".join(_CLASS_SEP_RE.split(class_name)) + ".py"
