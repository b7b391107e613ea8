"""Import resolution — resolves ``"module:attribute"`` strings to ViewResolvers.

Shared utility used by ``drape resolve`` and ``drape check``.
"""

import importlib

from drape.views.view_resolver import ViewResolver


def resolve_views(import_string: str) -> ViewResolver:
    """Resolve an import string to a ``ViewResolver`` instance.

    Accepts ``"module:attribute"`` format. When the attribute portion
    is omitted, defaults to ``"views"`` (e.g. ``"myapp"`` resolves to
    ``myapp.views``).

    Supports factory functions: if the resolved object is callable and
    not a ViewResolver, it is called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a ``ViewResolver``.
        ConfigurationError: If building the resolver fails validation.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "views"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, ViewResolver):
        obj = obj()

    if not isinstance(obj, ViewResolver):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a drape.ViewResolver"
        raise TypeError(msg)

    return obj


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` strings into a parameter dict.

    Raises:
        ValueError: If an entry has no ``=``.
    """
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"Expected KEY=VALUE, got {pair!r}"
            raise ValueError(msg)
        params[key] = value
    return params
