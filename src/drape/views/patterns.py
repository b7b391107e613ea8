"""View-name pattern compilation and whole-string matching.

Template mapping keys become regular expressions when ``use_patterns``
is on. A key must match the *entire* identifier: ``account/.*`` matches
``account/show`` but ``account`` does not match ``account/show``.
"""

import re

from drape.errors import ConfigurationError
from drape.views.cache import MemoCache


def compile_pattern(source: str) -> re.Pattern[str]:
    """Compile a mapping key, raising ``ConfigurationError`` if malformed."""
    try:
        return re.compile(source)
    except re.error as exc:
        msg = f"Invalid template mapping pattern {source!r}: {exc}"
        raise ConfigurationError(msg) from exc


class PatternMatcher:
    """Compiles mapping keys and matches identifiers against them.

    With a cache, each source is compiled once per process and the
    compiled ``re.Pattern`` is shared across threads (it is immutable;
    match objects are created per call). Without one, every ``matches()``
    call recompiles.
    """

    __slots__ = ("_cache",)

    def __init__(self, cache: MemoCache[str, re.Pattern[str]] | None = None) -> None:
        self._cache = cache

    @property
    def cache(self) -> MemoCache[str, re.Pattern[str]] | None:
        return self._cache

    def compile(self, source: str) -> re.Pattern[str]:
        if self._cache is None:
            return compile_pattern(source)
        return self._cache.get_or_create(source, compile_pattern)

    def matches(self, source: str, identifier: str) -> bool:
        return self.compile(source).fullmatch(identifier) is not None

    def validate(self, sources: tuple[str, ...] | list[str]) -> None:
        """Compile every source up front so a bad one fails at startup."""
        for source in sources:
            self.compile(source)
