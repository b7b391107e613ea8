"""ViewResolver — one object wiring resolution, policy, and composition.

Built once at startup from a ``DecorationConfig`` and a renderer, then
shared by every request-handling thread::

    from drape import DecorationConfig, ViewResolver
    from drape.templating import KidaRenderer, create_environment

    config = DecorationConfig(
        default_template_name="common/standard",
        template_mapping={"account/.*": "common/account-layout"},
        use_patterns=True,
    )
    views = ViewResolver(config, KidaRenderer(create_environment(config)))

    # In a request handler:
    html = views.render("hotels/show", {"hotel": hotel}, params=request.query)
"""

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from drape.config import DecorationConfig
from drape.views.cache import MemoCache
from drape.views.compositor import Compositor, Renderer
from drape.views.interceptor import Interceptor
from drape.views.naming import ViewAttributes
from drape.views.policy import Decision, DecorationPolicy
from drape.views.resolver import ResolvedTemplate, TemplateResolver

logger = logging.getLogger("drape.views")

_NO_PARAMS: Mapping[str, str] = {}


class ViewResolver:
    """Resolves and renders logical views with layout decoration.

    Construction validates every pattern key, so a malformed mapping
    raises ``ConfigurationError`` here rather than on some later request.
    """

    __slots__ = ("_compositor", "_config", "_interceptors", "_policy", "_resolver")

    def __init__(
        self,
        config: DecorationConfig,
        renderer: Renderer,
        *,
        interceptors: Sequence[Interceptor] = (),
        name_cache: MemoCache[str, str | None] | None = None,
        pattern_cache: MemoCache[str, re.Pattern[str]] | None = None,
        attributes: ViewAttributes | None = None,
    ) -> None:
        self._config = config
        self._resolver = TemplateResolver(
            config,
            name_cache=name_cache,
            pattern_cache=pattern_cache,
            attributes=attributes,
        )
        self._resolver.validate()
        self._policy = DecorationPolicy(config, self._resolver)
        self._compositor = Compositor(renderer, self._resolver)
        self._interceptors = tuple(interceptors)
        logger.debug(
            "ViewResolver ready: %d mapping entries, patterns=%s, dynamic=%s, default=%r",
            len(config.template_mapping),
            config.use_patterns,
            config.dynamic_templates,
            config.default_template_name,
        )

    @property
    def config(self) -> DecorationConfig:
        return self._config

    @property
    def resolver(self) -> TemplateResolver:
        return self._resolver

    @property
    def policy(self) -> DecorationPolicy:
        return self._policy

    def template_name(self, identifier: str) -> str | None:
        """The configured template for *identifier*, ignoring the request."""
        return self._resolver.resolve_template_name(identifier)

    def resolve(self, identifier: str) -> ResolvedTemplate:
        return self._resolver.resolve(identifier)

    def intercept(self, identifier: str, params: Mapping[str, str]) -> str:
        """Run *identifier* through the configured interceptors, in order."""
        for interceptor in self._interceptors:
            identifier = interceptor.apply(identifier, params)
        return identifier

    def decide(self, identifier: str, params: Mapping[str, str] | None = None) -> Decision:
        return self._policy.decide(params if params is not None else _NO_PARAMS, identifier)

    def explain(
        self,
        identifier: str,
        params: Mapping[str, str] | None = None,
    ) -> tuple[ResolvedTemplate, Decision]:
        """Resolution and decision for a request, without rendering.

        The cascade runs at most once, inside the decision. The returned
        ``ResolvedTemplate`` carries the template the decision chose, so
        it is ``None`` for a cancelled request.
        """
        params = params if params is not None else _NO_PARAMS
        identifier = self.intercept(identifier, params)
        decision = self._policy.decide(params, identifier)
        return self._resolver.bundle(identifier, decision.template_name), decision

    def render(
        self,
        identifier: str,
        model: dict[str, Any] | None = None,
        params: Mapping[str, str] | None = None,
    ) -> str:
        """Render *identifier* for a request, decorated or not.

        Args:
            identifier: Logical view identifier returned by the handler.
            model: Attributes for the view. Not mutated.
            params: The current request's parameters.

        Returns:
            Whatever the renderer returns.

        Raises:
            Anything the renderer raises, unchanged.
        """
        resolved, decision = self.explain(identifier, params)
        return self._compositor.render(decision, resolved, model if model is not None else {})
