"""Decoration configuration.

DecorationConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from drape.errors import ConfigurationError

TemplateMapping = tuple[tuple[str, str], ...]


def normalize_mapping(
    mapping: Mapping[str, str] | Iterable[tuple[str, str]] | None,
) -> TemplateMapping:
    """Turn a dict or an iterable of pairs into an ordered tuple of pairs.

    Insertion order is kept: it is the search order for pattern lookup.
    Keys and template names must both be strings; nothing is coerced.
    """
    if mapping is None:
        return ()
    items = mapping.items() if isinstance(mapping, Mapping) else mapping
    pairs: list[tuple[str, str]] = []
    for entry in items:
        key, template_name = entry
        if not isinstance(key, str) or not isinstance(template_name, str):
            msg = (
                "template_mapping keys and template names must be strings, "
                f"got {key!r} -> {template_name!r}."
            )
            raise ConfigurationError(msg)
        pairs.append((key, template_name))
    return tuple(pairs)


@dataclass(frozen=True, slots=True)
class DecorationConfig:
    """Layout decoration configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = DecorationConfig(
            path_prefix="views/",
            default_template_name="common/standard",
            template_mapping={"account/.*": "common/account-layout"},
            use_patterns=True,
        )
    """

    # Resource paths: prefix + name + suffix
    path_prefix: str = ""
    path_suffix: str = ".html"

    # Template selection
    default_template_name: str | None = None  # None = no decoration unless mapped
    template_mapping: TemplateMapping | Mapping[str, str] = ()  # Ordered; first match wins
    use_patterns: bool = False  # Mapping keys are regular expressions
    cache_template_names: bool = True
    cache_patterns: bool = True

    # Per-request override
    layout_param: str = "layout"
    cancel_value: str | None = "none"  # None = decoration cannot be cancelled
    dynamic_templates: bool = False  # Layout param value names the template

    # "template+view" inline override in identifiers
    inline_separator: str = "+"

    # Attributes exposed to the template
    content_locator_attr: str = "view_url"
    view_name_attr: str = "view_name"
    title_key_attr: str = "title"
    title_key_prefix: str = "view.title."

    # Templates
    template_dir: str | Path = "templates"
    auto_reload: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "template_mapping", normalize_mapping(self.template_mapping))

        if not self.layout_param:
            msg = "layout_param must be a non-empty request parameter name."
            raise ConfigurationError(msg)
        if not self.inline_separator:
            msg = "inline_separator must be a non-empty string."
            raise ConfigurationError(msg)

        attrs = (self.content_locator_attr, self.view_name_attr, self.title_key_attr)
        if len(set(attrs)) != len(attrs):
            msg = (
                "content_locator_attr, view_name_attr and title_key_attr must be distinct, "
                f"got {attrs!r}."
            )
            raise ConfigurationError(msg)
