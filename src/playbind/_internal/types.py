"""Shared type aliases used across playbind modules."""

from collections.abc import Callable
from re import Pattern
from typing import Any, TypeAlias

# Canonical option map sent to the transport
OptionMap: TypeAlias = dict[str, Any]

# One normalize() argument: a dataclass record, a Mapping, a list or tuple
# whose first item is one of those, or None. Checked at runtime.
OptionSource: TypeAlias = Any

# URL predicate used for request interception
URLPredicate: TypeAlias = Callable[[str], Any]

# What a URL matcher can be built from
URLPattern: TypeAlias = str | Pattern[str] | URLPredicate

# Route handler, receives the route-control handle and the intercepted request
RouteHandler: TypeAlias = Callable[..., Any]
