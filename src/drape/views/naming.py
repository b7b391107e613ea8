"""Names of the attributes a layout template receives.

A decorated render adds three reserved attributes to the model:

- the content locator (resource path of the page being wrapped)
- the logical view name
- a title key for localized page titles

``ViewAttributes`` holds their names and derives the title key. Swap in
a different instance (or a subclass overriding ``title_key``) to change
the naming without touching the resolver or compositor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from drape.config import DecorationConfig


def strip_query(identifier: str) -> str:
    """Drop everything from the first ``?`` on."""
    index = identifier.find("?")
    return identifier if index < 0 else identifier[:index]


@dataclass(frozen=True, slots=True)
class ViewAttributes:
    """Attribute names exposed to layout templates.

    A layout renders the wrapped page and the title with::

        <title>{{ t(title) }}</title>
        ...
        {% include view_url %}

    ``title_key("hotels/show")`` is ``"view.title.hotels.show"``, meant
    to be looked up in a message catalog such as::

        view.title.hotels.show=Hotel Details
    """

    content_locator: str = "view_url"
    view_name: str = "view_name"
    title_key_name: str = "title"
    title_key_prefix: str = "view.title."

    @classmethod
    def from_config(cls, config: DecorationConfig) -> ViewAttributes:
        return cls(
            content_locator=config.content_locator_attr,
            view_name=config.view_name_attr,
            title_key_name=config.title_key_attr,
            title_key_prefix=config.title_key_prefix,
        )

    def title_key(self, identifier: str) -> str:
        """Message key for the title of *identifier*.

        The ``?...`` suffix is dropped and path separators become dots.
        """
        return self.title_key_prefix + strip_query(identifier).replace("/", ".")

    def augment(
        self,
        model: dict[str, Any],
        *,
        content_path: str,
        identifier: str,
    ) -> dict[str, Any]:
        """Return a copy of *model* with the three reserved attributes set."""
        return {
            **model,
            self.content_locator: content_path,
            self.view_name: identifier,
            self.title_key_name: self.title_key(identifier),
        }
