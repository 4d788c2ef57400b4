"""Resources: embedded ``@@ name`` sections and their process-wide cache."""

from .store import (
    ResourceStore,
    default_store,
    parse_resources,
    read_unit_data,
    unit_id,
)

__all__ = [
    "ResourceStore",
    "default_store",
    "parse_resources",
    "read_unit_data",
    "unit_id",
]
