"""Identifier rewriting before resolution.

``ContentVariantInterceptor`` lets a page ship a separate content-only
view (``hotels/showContent``) and have clients opt into it with a query
parameter (``?htmlFormat=nolayout``), without every handler checking
the parameter itself.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol


class Interceptor(Protocol):
    """Rewrites an identifier for the current request."""

    def apply(self, identifier: str, params: Mapping[str, str]) -> str: ...


@dataclass(frozen=True, slots=True)
class ContentVariantInterceptor:
    """Append *suffix* to the identifier when ``params[param] == value``.

    Usage::

        interceptor = ContentVariantInterceptor()
        interceptor.apply("hotels/show", {"htmlFormat": "nolayout"})
        # "hotels/showContent"
    """

    param: str = "htmlFormat"
    value: str = "nolayout"
    suffix: str = "Content"

    def apply(self, identifier: str, params: Mapping[str, str]) -> str:
        if params.get(self.param) != self.value:
            return identifier
        # Keep a trailing "?..." after the suffix
        name, sep, query = identifier.partition("?")
        return f"{name}{self.suffix}{sep}{query}"
