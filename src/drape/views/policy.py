"""Per-request decoration decisions.

Whether a view gets its layout is decided fresh for every request from
that request's parameters. Only the template-name lookup underneath is
cached; the decision itself never is.

Two modes, fixed by ``DecorationConfig.dynamic_templates``:

**Static** — always the resolver's template, unless the request says
``layout=none``::

    /hotels/show              -> decorate with common/standard
    /hotels/show?layout=none  -> bare content (AJAX partial)
    /hotels/show?layout=print -> decorate with common/standard

**Dynamic** — the layout parameter may also *name* the template::

    /hotels/show              -> decorate with common/standard
    /hotels/show?layout=none  -> bare content
    /hotels/show?layout=print -> decorate with print
"""

from collections.abc import Mapping
from dataclasses import dataclass

from drape.config import DecorationConfig
from drape.views.resolver import TemplateResolver


@dataclass(frozen=True, slots=True)
class Decision:
    """Outcome of ``DecorationPolicy.decide()`` for one request."""

    decorate: bool
    template_name: str | None = None


NO_DECORATION = Decision(decorate=False)


class DecorationPolicy:
    """Combines request parameters with the resolver's template name."""

    __slots__ = ("_cancel_value", "_dynamic", "_layout_param", "_resolver")

    def __init__(self, config: DecorationConfig, resolver: TemplateResolver) -> None:
        self._layout_param = config.layout_param
        self._cancel_value = config.cancel_value
        self._dynamic = config.dynamic_templates
        self._resolver = resolver

    @property
    def dynamic(self) -> bool:
        return self._dynamic

    def is_cancelled(self, params: Mapping[str, str]) -> bool:
        """True if the request asks for no layout."""
        if self._cancel_value is None:
            return False
        return params.get(self._layout_param) == self._cancel_value

    def decide(self, params: Mapping[str, str], identifier: str) -> Decision:
        """Decide whether and how to decorate *identifier* for this request.

        An empty or missing template name means no decoration, whatever
        the mode.
        """
        if self.is_cancelled(params):
            return NO_DECORATION

        template_name: str | None = None
        if self._dynamic:
            template_name = params.get(self._layout_param)
        if template_name is None:
            template_name = self._resolver.resolve_template_name(identifier)

        if not template_name:
            return NO_DECORATION
        return Decision(decorate=True, template_name=template_name)
