"""Drape — layout decoration for logical views.

Resolves the view name a request handler returns into a layout
template, decides per request whether to apply it, and renders the
page inside it.

Basic usage::

    from drape import DecorationConfig, ViewResolver
    from drape.templating import KidaRenderer, create_environment

    config = DecorationConfig(default_template_name="common/standard")
    views = ViewResolver(config, KidaRenderer(create_environment(config)))

    views.render("hotels/show", {"hotel": hotel})                       # decorated
    views.render("hotels/show", {"hotel": hotel}, {"layout": "none"})   # bare content
"""

import importlib

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "ContentVariantInterceptor",
    "Decision",
    "DecorationConfig",
    "DrapeError",
    "QueryParams",
    "RenderError",
    "ResolvedTemplate",
    "TemplateResolver",
    "ViewAttributes",
    "ViewResolver",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "drape.errors",
    "ContentVariantInterceptor": "drape.views.interceptor",
    "Decision": "drape.views.policy",
    "DecorationConfig": "drape.config",
    "DrapeError": "drape.errors",
    "QueryParams": "drape.http.query",
    "RenderError": "drape.errors",
    "ResolvedTemplate": "drape.views.resolver",
    "TemplateResolver": "drape.views.resolver",
    "ViewAttributes": "drape.views.naming",
    "ViewResolver": "drape.views.view_resolver",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import drape`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
