"""Rehydration — canonical option maps back onto configuration records.

The inverse of normalization, used when a protocol response is decoded
into a typed record. Coercion is deliberately narrow:

- integral number → ``int`` field (``3`` or ``3.0``, never ``True``)
- ``str`` → ``str`` field
- ``bool`` → ``bool`` field

``Optional[X]`` / ``X | None`` fields unwrap to ``X``. Anything else means
the wire representation and the record disagree, and rehydration raises
``SchemaMismatchError`` before touching the destination. Keys missing from
the source (or mapped to ``None``) leave the field as it is.
"""

import dataclasses
import logging
import types
import typing
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, TypeVar

from playbind.config import DEFAULT_CONFIG, BindingConfig
from playbind.errors import SchemaMismatchError
from playbind.options.fields import field_names, is_record

logger = logging.getLogger("playbind.options")

_COERCIBLE: tuple[type, ...] = (bool, int, str)
_MISMATCH = object()

T = TypeVar("T")


def rehydrate(
    source: Mapping[str, Any],
    destination: T,
    *,
    config: BindingConfig | None = None,
) -> T:
    """Copy values from *source* onto the fields of record *destination*.

    Returns *destination* for chaining. Frozen dataclasses are updated in
    place as well.

    Raises ``SchemaMismatchError`` if any value cannot be coerced into its
    field; in that case no field has been assigned.
    """
    if not is_record(destination):
        msg = f"rehydrate() needs a dataclass instance, got {type(destination).__name__}"
        raise TypeError(msg)

    key = (config or DEFAULT_CONFIG).name_key
    hints = _field_types(type(destination))
    updates: list[tuple[str, Any]] = []

    for attr, name in field_names(destination, key):
        if name not in source:
            continue
        raw = source[name]
        if raw is None:
            continue
        targets = hints[attr]
        value = _coerce(raw, targets)
        if value is _MISMATCH:
            err = SchemaMismatchError(
                field=attr,
                key=name,
                value=raw,
                expected=" | ".join(t.__name__ for t in targets) or "unsupported field type",
            )
            logger.debug("Rehydrating %s failed: %s", type(destination).__name__, err)
            raise err
        updates.append((attr, value))

    for attr, value in updates:
        object.__setattr__(destination, attr, value)
    return destination


def rehydrate_new(
    cls: type[T],
    source: Mapping[str, Any],
    *,
    config: BindingConfig | None = None,
) -> T:
    """Create a default *cls* record and rehydrate it from *source*.

    Every field of *cls* must have a default.
    """
    return rehydrate(source, cls(), config=config)


def _coerce(value: Any, targets: tuple[type, ...]) -> Any:
    """Coerce *value* into one of *targets*, or return ``_MISMATCH``."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return value if bool in targets else _MISMATCH

    if isinstance(value, int):
        return value if int in targets else _MISMATCH

    if isinstance(value, float):
        if int in targets and value.is_integer():
            return int(value)
        return _MISMATCH

    if isinstance(value, str):
        return value if str in targets else _MISMATCH

    return _MISMATCH


@lru_cache(maxsize=256)
def _field_types(cls: type) -> dict[str, tuple[type, ...]]:
    """Map each field of *cls* to the coercible types it accepts.

    Annotations naming types that only exist under ``TYPE_CHECKING`` cannot
    be evaluated; those records fall back to the raw field annotations.
    """
    try:
        hints = typing.get_type_hints(cls)
    except NameError:
        hints = {}
    return {
        f.name: _accepted(hints.get(f.name, f.type))
        for f in dataclasses.fields(cls)
    }


def _accepted(annotation: Any) -> tuple[type, ...]:
    """Reduce a field annotation to the coercible types it names."""
    if isinstance(annotation, str):
        return _accepted_names(annotation)
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        members = typing.get_args(annotation)
    else:
        members = (annotation,)
    return tuple(t for t in _COERCIBLE if t in members)


def _accepted_names(annotation: str) -> tuple[type, ...]:
    """Resolve an unevaluated annotation such as ``"int | None"`` by name."""
    text = annotation.strip()
    for wrapper in ("typing.Optional[", "Optional["):
        if text.startswith(wrapper) and text.endswith("]"):
            text = text[len(wrapper) : -1]
            break
    names = {part.strip() for part in text.split("|")}
    return tuple(t for t in _COERCIBLE if t.__name__ in names)
