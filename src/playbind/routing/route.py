"""RouteHandlerEntry frozen dataclass."""

from dataclasses import dataclass

from playbind._internal.types import RouteHandler
from playbind.routing.matcher import URLMatcher


@dataclass(frozen=True, slots=True)
class RouteHandlerEntry:
    """A URL matcher paired with the handler to run for matching requests.

    Created when interception is registered, dropped when it is
    unregistered. Ordering and first-match semantics belong to the table
    holding the entries.
    """

    matcher: URLMatcher
    handler: RouteHandler

    def matches(self, url: str) -> bool:
        return self.matcher.match(url)
