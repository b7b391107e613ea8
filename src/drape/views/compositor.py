"""Decorated rendering.

The compositor turns a decision into one call on the renderer:

* **No decoration**: render the content resource with the handler's
  model, untouched.
* **Decoration**: render the layout template with the model plus the
  content locator, view name, and title key. The layout includes the
  content resource itself, at the slot named by the locator attribute.

Rendering belongs to the renderer. Its exceptions pass through here
unchanged; nothing is retried or wrapped.
"""

import logging
from typing import Any, Protocol

from drape.views.policy import Decision
from drape.views.resolver import ResolvedTemplate, TemplateResolver

logger = logging.getLogger("drape.views")


class Renderer(Protocol):
    """Renders a resource path with an attribute model to a string.

    Any callable with this signature works, e.g. ``KidaRenderer`` or a
    plain function in tests.
    """

    def __call__(self, resource_path: str, model: dict[str, Any], /) -> str: ...


class Compositor:
    """Builds the render call for a decision and delegates it."""

    __slots__ = ("_renderer", "_resolver")

    def __init__(self, renderer: Renderer, resolver: TemplateResolver) -> None:
        self._renderer = renderer
        self._resolver = resolver

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    def render(
        self,
        decision: Decision,
        resolved: ResolvedTemplate,
        model: dict[str, Any],
    ) -> str:
        if not decision.decorate or decision.template_name is None:
            logger.debug("Rendering %s undecorated", resolved.content_path)
            return self._renderer(resolved.content_path, model)

        template_path = self._resolver.build_path(decision.template_name)
        augmented = self._resolver.attributes.augment(
            model,
            content_path=resolved.content_path,
            identifier=resolved.view_name,
        )
        logger.debug("Rendering %s in template %s", resolved.content_path, template_path)
        return self._renderer(template_path, augmented)
