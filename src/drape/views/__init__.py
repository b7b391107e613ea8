"""Views — template resolution, decoration policy, and composition.

Control flow for one request::

    identifier ─► interceptors ─► DecorationPolicy.decide(params)
                                        │
                                        ▼
                         TemplateResolver.resolve_template_name
                      (inline → cache → exact → patterns → default)
                                        │
                                        ▼
                               Compositor.render ─► renderer
"""

from drape.views.cache import MemoCache, new_name_cache, new_pattern_cache
from drape.views.compositor import Compositor, Renderer
from drape.views.interceptor import ContentVariantInterceptor, Interceptor
from drape.views.naming import ViewAttributes
from drape.views.patterns import PatternMatcher, compile_pattern
from drape.views.policy import NO_DECORATION, Decision, DecorationPolicy
from drape.views.resolver import ResolvedTemplate, TemplateResolver
from drape.views.view_resolver import ViewResolver

__all__ = [
    "NO_DECORATION",
    "Compositor",
    "ContentVariantInterceptor",
    "Decision",
    "DecorationPolicy",
    "Interceptor",
    "MemoCache",
    "PatternMatcher",
    "Renderer",
    "ResolvedTemplate",
    "TemplateResolver",
    "ViewAttributes",
    "ViewResolver",
    "compile_pattern",
    "new_name_cache",
    "new_pattern_cache",
]
