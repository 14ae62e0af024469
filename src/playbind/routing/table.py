"""Route table — ordered request-interception entries.

Pages and browser contexts each own one table. Entries are matched in
registration order and the first match wins::

    table = RouteTable()
    table.add("**/*.png", block_images)
    table.add(re.compile(r"/api/v\\d+/"), mock_api)

    handled = await table.dispatch(request.url, route, request)

Registration and removal may come from any thread; dispatch works on a
snapshot and never holds the lock while a handler runs.
"""

import logging
import threading
from collections.abc import Iterator
from typing import Any

from playbind._internal.invoke import invoke
from playbind._internal.types import RouteHandler, URLPattern
from playbind.config import DEFAULT_CONFIG, BindingConfig
from playbind.routing.matcher import URLMatcher
from playbind.routing.route import RouteHandlerEntry

logger = logging.getLogger("playbind.routing")


class RouteTable:
    """Registration-ordered collection of ``RouteHandlerEntry`` objects."""

    __slots__ = ("_config", "_entries", "_lock")

    def __init__(self, config: BindingConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._entries: list[RouteHandlerEntry] = []
        self._lock = threading.Lock()

    def add(self, url_or_predicate: URLPattern, handler: RouteHandler) -> RouteHandlerEntry:
        """Register *handler* for URLs matching *url_or_predicate*.

        Raises ``UnknownMatcherError`` if *url_or_predicate* is not a glob,
        a regular expression, or a callable.
        """
        matcher = URLMatcher.create(
            url_or_predicate, case_sensitive=self._config.case_sensitive_globs
        )
        entry = RouteHandlerEntry(matcher=matcher, handler=handler)
        with self._lock:
            self._entries.append(entry)
        logger.debug("Registered route %s %r", matcher.kind.value, url_or_predicate)
        return entry

    def remove(self, url_or_predicate: URLPattern, handler: RouteHandler | None = None) -> int:
        """Unregister entries built from *url_or_predicate*.

        With *handler*, only entries for that handler are removed.
        Returns the number of entries removed.
        """
        with self._lock:
            kept = [
                e
                for e in self._entries
                if not (
                    e.matcher.same_pattern(url_or_predicate)
                    and (handler is None or e.handler == handler)
                )
            ]
            removed = len(self._entries) - len(kept)
            self._entries = kept
        if removed:
            logger.debug("Removed %d route(s) for %r", removed, url_or_predicate)
        return removed

    def clear(self) -> None:
        with self._lock:
            self._entries = []

    def find(self, url: str) -> RouteHandlerEntry | None:
        """Return the first entry matching *url*, or ``None``."""
        for entry in self:
            if entry.matches(url):
                return entry
        if self._config.log_unmatched:
            logger.debug("No route matches %s", url)
        return None

    async def dispatch(self, url: str, *args: Any) -> bool:
        """Run the first handler matching *url* with *args*.

        *args* are passed through unchanged — typically the route-control
        handle and the intercepted request. Returns False when no entry
        matches, leaving the request for the caller to continue.
        """
        entry = self.find(url)
        if entry is None:
            return False
        logger.debug("Dispatching %s to %r", url, entry.handler)
        await invoke(entry.handler, *args)
        return True

    def __iter__(self) -> Iterator[RouteHandlerEntry]:
        with self._lock:
            snapshot = tuple(self._entries)
        return iter(snapshot)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
