"""URL matchers for request interception.

A matcher is built from whatever the caller passed to ``route()``:

- a glob string — shell wildcards (``*``, ``?``, ``[...]``); ``*`` also
  crosses ``/``, so ``"**/api/*"`` matches any URL with an ``/api/`` segment
- a compiled regular expression — searched, not anchored
- a predicate — called with the URL, truthiness decides

Matchers are immutable and hold no state, so one instance can be shared by
any number of concurrent interception callbacks.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from fnmatch import fnmatchcase
from typing import Any

from playbind._internal.types import URLPattern
from playbind.errors import UnknownMatcherError


class MatcherKind(Enum):
    """How a matcher's pattern is applied to a URL."""

    GLOB = "glob"
    REGEX = "regex"
    PREDICATE = "predicate"


@dataclass(frozen=True, slots=True)
class URLMatcher:
    """A frozen URL matcher.

    Use ``URLMatcher.create()`` rather than the constructor; it picks the
    kind from the pattern's type::

        URLMatcher.create("**/*.png").match("https://x.test/a/b.png")        # True
        URLMatcher.create(re.compile(r"/v\\d+/")).match("https://x.test/v1/")  # True
        URLMatcher.create(lambda url: "admin" in url).match("https://x.test/") # False
    """

    kind: MatcherKind
    pattern: Any
    case_sensitive: bool = True

    @classmethod
    def create(cls, url_or_predicate: URLPattern, *, case_sensitive: bool = True) -> URLMatcher:
        """Build a matcher, choosing its kind from the type of *url_or_predicate*.

        Raises ``UnknownMatcherError`` for anything that is not a ``str``,
        a ``str`` regular expression, or a callable.
        """
        if isinstance(url_or_predicate, re.Pattern):
            if not isinstance(url_or_predicate.pattern, str):
                raise UnknownMatcherError(url_or_predicate)
            return cls(MatcherKind.REGEX, url_or_predicate, case_sensitive)
        if isinstance(url_or_predicate, str):
            return cls(MatcherKind.GLOB, url_or_predicate, case_sensitive)
        if callable(url_or_predicate):
            return cls(MatcherKind.PREDICATE, url_or_predicate, case_sensitive)
        raise UnknownMatcherError(url_or_predicate)

    def match(self, url: str) -> bool:
        """Return True if *url* matches.

        Raises ``UnknownMatcherError`` if the stored kind has no dispatch
        branch (a matcher built by hand with a bogus kind).
        """
        match self.kind:
            case MatcherKind.REGEX:
                return self.pattern.search(url) is not None
            case MatcherKind.GLOB:
                if self.case_sensitive:
                    return fnmatchcase(url, self.pattern)
                return fnmatchcase(url.casefold(), self.pattern.casefold())
            case MatcherKind.PREDICATE:
                predicate: Callable[[str], Any] = self.pattern
                return bool(predicate(url))
        raise UnknownMatcherError(self.kind)

    def same_pattern(self, url_or_predicate: URLPattern) -> bool:
        """Return True if this matcher was built from *url_or_predicate*.

        Strings and regular expressions compare by value (pattern and
        flags), predicates by identity.
        """
        if self.kind is MatcherKind.PREDICATE:
            return self.pattern is url_or_predicate
        return type(self.pattern) is type(url_or_predicate) and self.pattern == url_or_predicate
