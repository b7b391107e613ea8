"""Template-name resolution for logical view identifiers.

Given the string a request handler returned (``"hotels/show"``), pick
the layout template that should wrap it. The cascade, first answer
wins:

1. Inline override: ``"common/print+hotels/show"`` names its template
   explicitly (the part before the separator). Never cached.
2. Name cache (when ``cache_template_names``).
3. Exact key in the template mapping.
4. Pattern keys, in declaration order (when ``use_patterns``).
5. ``default_template_name``, possibly ``None`` (no decoration).

Answers from steps 3 to 5 are written to the name cache, the default
included, so a repeat lookup never walks the patterns again.
"""

import logging
import re
from dataclasses import dataclass

from drape.config import DecorationConfig
from drape.views.cache import MemoCache, new_name_cache, new_pattern_cache
from drape.views.naming import ViewAttributes, strip_query
from drape.views.patterns import PatternMatcher

logger = logging.getLogger("drape.views")


@dataclass(frozen=True, slots=True)
class ResolvedTemplate:
    """Everything the compositor needs to know about one identifier.

    Attributes:
        view_name: The identifier as returned by the handler.
        template_name: Layout template name, or ``None`` for no layout.
        template_path: ``prefix + template_name + suffix``, or ``None``.
        content_name: The identifier without inline template or ``?...``.
        content_path: ``prefix + content_name + suffix``.
        title_key: Message key for the page title.
    """

    view_name: str
    template_name: str | None
    template_path: str | None
    content_name: str
    content_path: str
    title_key: str


class TemplateResolver:
    """Resolves view identifiers to layout template names.

    Owns the template mapping and both caches. Caches may be passed in
    explicitly; otherwise they are created here when the matching
    ``cache_*`` option is on, and stay empty until the first write.

    Usage::

        resolver = TemplateResolver(DecorationConfig(
            default_template_name="common/standard",
            template_mapping={"account/.*": "common/account-layout"},
            use_patterns=True,
        ))
        resolver.resolve_template_name("account/show")  # "common/account-layout"
        resolver.resolve_template_name("hotels/show")   # "common/standard"
    """

    __slots__ = ("_attributes", "_config", "_exact", "_matcher", "_names")

    def __init__(
        self,
        config: DecorationConfig,
        *,
        name_cache: MemoCache[str, str | None] | None = None,
        pattern_cache: MemoCache[str, re.Pattern[str]] | None = None,
        attributes: ViewAttributes | None = None,
    ) -> None:
        self._config = config

        # First entry wins for duplicate keys, same as pattern order
        exact: dict[str, str] = {}
        for key, template_name in config.template_mapping:
            exact.setdefault(key, template_name)
        self._exact = exact

        if config.cache_template_names:
            self._names = name_cache if name_cache is not None else new_name_cache()
        else:
            self._names = None

        if config.cache_patterns:
            patterns = pattern_cache if pattern_cache is not None else new_pattern_cache()
        else:
            patterns = None
        self._matcher = PatternMatcher(patterns)
        self._attributes = attributes or ViewAttributes.from_config(config)

    # -- Properties --

    @property
    def config(self) -> DecorationConfig:
        return self._config

    @property
    def name_cache(self) -> MemoCache[str, str | None] | None:
        return self._names

    @property
    def matcher(self) -> PatternMatcher:
        return self._matcher

    @property
    def attributes(self) -> ViewAttributes:
        return self._attributes

    # -- Resolution --

    def resolve_template_name(self, identifier: str) -> str | None:
        """Return the template name for *identifier*, or ``None``."""
        index = identifier.find(self._config.inline_separator)
        if index >= 0:
            return identifier[:index]

        names = self._names
        # Grow-only: a key, once present, never changes value
        if names is not None and identifier in names:
            return names.get(identifier)

        template_name = self._lookup(identifier)
        if template_name is None:
            template_name = self._config.default_template_name
            logger.debug("No template mapping for %r, using default %r", identifier, template_name)

        if names is not None:
            names.put(identifier, template_name)
        return template_name

    def _lookup(self, identifier: str) -> str | None:
        """Steps 3 and 4: exact key, then patterns in declaration order."""
        template_name = self._exact.get(identifier)
        if template_name is not None:
            logger.debug("Exact mapping %r -> %r", identifier, template_name)
            return template_name

        if self._config.use_patterns:
            for source, template_name in self._config.template_mapping:
                if self._matcher.matches(source, identifier):
                    logger.debug("Pattern %r matched %r -> %r", source, identifier, template_name)
                    return template_name
        return None

    def content_name(self, identifier: str) -> str:
        """The content part of *identifier*.

        ``"common/print+hotels/show?x=1"`` -> ``"hotels/show"``.
        """
        _, sep, rest = identifier.partition(self._config.inline_separator)
        return strip_query(rest if sep else identifier)

    def build_path(self, name: str) -> str:
        """Resource path for a template or view name."""
        return f"{self._config.path_prefix}{name}{self._config.path_suffix}"

    def resolve(self, identifier: str) -> ResolvedTemplate:
        """Resolve template and content paths plus the title key."""
        return self.bundle(identifier, self.resolve_template_name(identifier))

    def bundle(self, identifier: str, template_name: str | None) -> ResolvedTemplate:
        """Build the ``ResolvedTemplate`` for an already-chosen template.

        Runs no part of the cascade; used when a request decision has
        picked the template already.
        """
        content_name = self.content_name(identifier)
        return ResolvedTemplate(
            view_name=identifier,
            template_name=template_name,
            template_path=self.build_path(template_name) if template_name else None,
            content_name=content_name,
            content_path=self.build_path(content_name),
            title_key=self._attributes.title_key(identifier),
        )

    def validate(self) -> None:
        """Compile every pattern key now.

        Raises ``ConfigurationError`` for the first malformed key. With
        pattern caching on, this also warms the pattern cache.
        """
        if self._config.use_patterns:
            self._matcher.validate([key for key, _ in self._config.template_mapping])
