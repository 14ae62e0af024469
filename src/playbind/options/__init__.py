"""Options — call-time option values to canonical maps, and back.

Normalization flattens configuration records and mappings into the
``dict[str, Any]`` the transport serializes; rehydration copies a decoded
response map back onto a record.
"""

from playbind.options.fields import external_name, field_names, option
from playbind.options.normalize import flatten, merge_options, normalize
from playbind.options.rehydrate import rehydrate, rehydrate_new

__all__ = [
    "external_name",
    "field_names",
    "flatten",
    "merge_options",
    "normalize",
    "option",
    "rehydrate",
    "rehydrate_new",
]
