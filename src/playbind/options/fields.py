"""External field names for configuration records.

A configuration record is a dataclass whose fields each carry the name the
remote protocol uses for them. The name is declared once, at class
definition, through field metadata::

    @dataclass
    class GotoOptions:
        wait_until: str | None = option("waitUntil", default=None)
        timeout: float | None = option("timeout", default=None)
        referer: str | None = None          # untagged: key is "referer"

Tags may carry comma-separated flags after the name (``"timeout,omitempty"``);
only the part before the first comma is the name.
"""

import dataclasses
from functools import lru_cache
from typing import Any

from playbind.config import DEFAULT_CONFIG


def option(name: str, *, key: str = DEFAULT_CONFIG.name_key, **kwargs: Any) -> Any:
    """Declare a dataclass field with an external *name*.

    Accepts every keyword ``dataclasses.field`` accepts. Existing metadata
    is preserved; the name is stored under *key*.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[key] = name
    return dataclasses.field(metadata=metadata, **kwargs)


def external_name(f: dataclasses.Field, key: str = DEFAULT_CONFIG.name_key) -> str:
    """Return the wire name of dataclass field *f*.

    Falls back to the attribute name when the field is untagged or the tag
    has an empty name part.
    """
    tag = f.metadata.get(key, "")
    name = str(tag).split(",")[0]
    return name or f.name


def is_record(value: Any) -> bool:
    """Return True if *value* is a dataclass instance (not a dataclass type)."""
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def field_names(record: Any, key: str = DEFAULT_CONFIG.name_key) -> tuple[tuple[str, str], ...]:
    """Return ``(attribute, external_name)`` pairs for a record or record type.

    Order follows field declaration order. The table is computed once per
    type and metadata key.
    """
    cls = record if isinstance(record, type) else type(record)
    return _field_table(cls, key)


@lru_cache(maxsize=256)
def _field_table(cls: type, key: str) -> tuple[tuple[str, str], ...]:
    return tuple((f.name, external_name(f, key)) for f in dataclasses.fields(cls))
