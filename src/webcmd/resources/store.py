"""Embedded resource sections: parse ``@@ name`` blocks from a unit's source."""

from __future__ import annotations

import base64
import binascii
import importlib.util
import re
import threading
from collections.abc import Callable, Mapping
from types import MappingProxyType, ModuleType

from ..exceptions import MalformedResourceError

_DATA_START_RE = re.compile(rb"^__DATA__[^\n]*\n", re.MULTILINE)
_DATA_END_RE = re.compile(rb"\n__END__[ \t]*\r?(?:\n.*)?\Z", re.DOTALL)
_MARKER_RE = re.compile(rb"^@@[ \t]+(.+?)[ \t]*\r?\n", re.MULTILINE)
_BASE64_SUFFIX_RE = re.compile(r"\s*\(\s*base64\s*\)$")

Reader = Callable[[str], "bytes | None"]

_EMPTY: Mapping[str, bytes] = MappingProxyType({})


def unit_id(unit: str | type | ModuleType) -> str:
    """Reduce a module, class or dotted name to the owning module's name."""
    if isinstance(unit, str):
        return unit
    if isinstance(unit, ModuleType):
        return unit.__name__
    return unit.__module__


def read_unit_data(unit: str) -> bytes | None:
    """Raw source bytes of *unit* if it carries a ``__DATA__`` section.

    The file is read through the module's loader, so line endings are
    untouched. Returns None for unknown modules, modules without a source
    file, and sources without a ``__DATA__`` line.
    """
    try:
        spec = importlib.util.find_spec(unit)
    except (ImportError, ValueError):
        return None
    if spec is None or not spec.origin or spec.loader is None:
        return None
    get_data = getattr(spec.loader, "get_data", None)
    if get_data is None:
        return None
    try:
        source = get_data(spec.origin)
    except OSError:
        return None
    if _DATA_START_RE.search(source) is None:
        return None
    return source


def parse_resources(blob: bytes | None, unit: str = "<blob>") -> Mapping[str, bytes]:
    """Parse *blob* into a read-only ``name -> bytes`` table.

    Everything up to a ``__DATA__`` line and from an ``__END__`` line on is
    ignored, as is anything before the first ``@@ name`` marker. Bodies are
    kept byte for byte; ``\\n`` and ``\\r\\n`` only matter on the marker lines
    themselves. A name ending in ``(base64)`` loses the annotation and its
    body is base64-decoded.
    """
    if not blob:
        return _EMPTY

    # The leading newline lets an __END__ on the very first line match.
    start = _DATA_START_RE.search(blob)
    content = b"\n" + (blob[start.end() :] if start else blob)
    content = _DATA_END_RE.sub(b"\n", content, count=1)

    parts = _MARKER_RE.split(content)
    table: dict[str, bytes] = {}
    for i in range(1, len(parts) - 1, 2):
        raw_name, body = parts[i], parts[i + 1]
        try:
            name = raw_name.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedResourceError(unit, repr(raw_name), "name is not UTF-8") from e
        stripped = _BASE64_SUFFIX_RE.sub("", name)
        if stripped != name:
            name = stripped
            try:
                body = base64.b64decode(body, validate=False)
            except (binascii.Error, ValueError) as e:
                raise MalformedResourceError(unit, name, f"invalid base64 ({e})") from e
        table[name] = body
    return MappingProxyType(table)


class ResourceStore:
    """Per-unit cache of parsed resource tables.

    Each unit is parsed at most once for the lifetime of the store; later
    calls return the same mapping even if the source changed on disk.
    """

    def __init__(self, reader: Reader | None = None):
        self._reader = reader or read_unit_data
        self._cache: dict[str, Mapping[str, bytes]] = {}
        self._lock = threading.Lock()

    def get_all(self, unit: str | type | ModuleType) -> Mapping[str, bytes]:
        key = unit_id(unit)
        table = self._cache.get(key)
        if table is not None:
            return table
        with self._lock:
            table = self._cache.get(key)
            if table is None:
                table = parse_resources(self._reader(key), key)
                self._cache[key] = table
        return table

    def get(self, unit: str | type | ModuleType, name: str) -> bytes | None:
        """Resource *name* of *unit*, or None when the unit has no such entry."""
        return self.get_all(unit).get(name)

    def is_cached(self, unit: str | type | ModuleType) -> bool:
        return unit_id(unit) in self._cache


_default_store: ResourceStore | None = None
_default_lock = threading.Lock()


def default_store() -> ResourceStore:
    """The process-wide store, created on first use."""
    global _default_store
    if _default_store is None:
        with _default_lock:
            if _default_store is None:
                _default_store = ResourceStore()
    return _default_store
