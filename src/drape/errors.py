"""Drape exception hierarchy.

Shared across the resolver, policy, compositor, and CLI so every module
raises and catches the same types.
"""


class DrapeError(Exception):
    """Base for all drape-specific errors."""


class ConfigurationError(DrapeError):
    """Raised when decoration configuration is invalid.

    Covers malformed template-mapping patterns. Typically raised while
    constructing a ``ViewResolver`` at startup, and never swallowed as
    "no match".
    """


class RenderError(DrapeError):
    """Raised by a renderer when a template or content resource fails.

    ``KidaRenderer`` raises it for a resource path with no template.

    Drape never catches this: the compositor delegates and lets the
    failure reach the caller, which owns the error response.
    """

    def __init__(self, resource_path: str, detail: str = "") -> None:
        self.resource_path = resource_path
        self.detail = detail
        super().__init__(resource_path, detail)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.resource_path}: {self.detail}"
        return self.resource_path
