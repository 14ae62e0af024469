"""Options normalization — call-time options into a canonical option map.

Automation calls take their options as a configuration record (a dataclass
with external field names), a plain mapping, or both: required positional
options merged with optional named ones. Everything ends up as one
``dict[str, Any]`` keyed by wire names, ready for the transport to encode.

Rules:

- ``None`` values are dropped (the field was not set); ``0``, ``False``
  and ``""`` are real values and kept.
- Nested records are flattened the same way, including inside lists and
  tuples, so the result is JSON-encodable.
- A list or tuple in the option position stands for "the first element,
  if any" (the variadic ``*options`` convenience at call sites).
"""

from collections.abc import Mapping
from typing import Any

from playbind._internal.types import OptionMap, OptionSource
from playbind.config import DEFAULT_CONFIG, BindingConfig
from playbind.errors import OptionsError
from playbind.options.fields import field_names, is_record


def normalize(*options: OptionSource, config: BindingConfig | None = None) -> OptionMap:
    """Normalize zero, one, or two option values into a canonical map.

    - ``normalize()`` returns ``{}``.
    - ``normalize(opts)`` flattens *opts* into a new map.
    - ``normalize(base, opts)`` flattens *base*, then merges *opts* over it.

    Raises ``TypeError`` for more than two values and ``OptionsError`` for
    a value that is not a record, mapping, sequence, or ``None``.
    """
    if len(options) > 2:
        msg = f"normalize() takes at most 2 option values ({len(options)} given)"
        raise TypeError(msg)
    if not options:
        return {}
    if len(options) == 1:
        return merge_options(None, options[0], config=config)
    return merge_options(options[0], options[1], config=config)


def merge_options(
    base: OptionSource,
    override: OptionSource,
    *,
    config: BindingConfig | None = None,
) -> OptionMap:
    """Flatten *base*, then merge the flattened *override* over it.

    *base* must be a record, a mapping, or ``None`` (an empty base).
    Keys present in both take the value from *override*.
    """
    key = (config or DEFAULT_CONFIG).name_key
    merged = {} if base is None else flatten(base, key=key)

    if isinstance(override, list | tuple):
        if not override:
            return merged
        override = override[0]
    if override is None:
        return merged

    merged.update(flatten(override, key=key))
    return merged


def flatten(value: Any, *, key: str = DEFAULT_CONFIG.name_key) -> OptionMap:
    """Flatten one record or mapping into a canonical map.

    Raises ``OptionsError`` if *value* is neither.
    """
    if is_record(value):
        out: OptionMap = {}
        for attr, name in field_names(value, key):
            item = getattr(value, attr)
            if item is not None:
                out[name] = _encode(item, key)
        return out

    if isinstance(value, Mapping):
        return {str(k): _encode(v, key) for k, v in value.items() if v is not None}

    msg = (
        f"cannot normalize {type(value).__name__} {value!r}: "
        "expected a dataclass record or a mapping"
    )
    raise OptionsError(msg)


def _encode(value: Any, key: str) -> Any:
    """Flatten records nested anywhere inside an option value.

    Mapping values and list/tuple items are walked recursively, so records
    at any depth come out as plain maps. Tuples come out as lists.
    """
    if is_record(value):
        return flatten(value, key=key)
    if isinstance(value, Mapping):
        return {str(k): _encode(v, key) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [_encode(v, key) for v in value]
    return value
