"""Routing — URL matchers and route-handler tables for request interception.

Entries are matched in registration order; the first match handles the
request.
"""

from playbind.routing.matcher import MatcherKind, URLMatcher
from playbind.routing.route import RouteHandlerEntry
from playbind.routing.table import RouteTable

__all__ = ["MatcherKind", "RouteHandlerEntry", "RouteTable", "URLMatcher"]
