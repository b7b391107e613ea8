"""Kida environment setup and the kida-backed renderer.

Creates a kida Environment from drape's DecorationConfig and exposes it
as a ``Renderer``. The environment is created once at startup and
shared by every request.

A layout template pulls in the wrapped page through the content
locator attribute::

    <html>
    <head><title>{{ title }}</title></head>
    <body>
      {% include view_url %}
    </body>
    </html>
"""

import logging
from collections.abc import Callable
from typing import Any

from kida import Environment, FileSystemLoader
from kida.environment.exceptions import TemplateNotFoundError

from drape.config import DecorationConfig
from drape.errors import RenderError

logger = logging.getLogger("drape.templating")


def create_environment(
    config: DecorationConfig,
    filters: dict[str, Callable[..., Any]] | None = None,
    globals_: dict[str, Any] | None = None,
) -> Environment:
    """Create a kida Environment rooted at ``config.template_dir``.

    Resource paths built by the resolver (``path_prefix + name +
    path_suffix``) are looked up relative to that directory.
    """
    env = Environment(
        loader=FileSystemLoader(str(config.template_dir)),
        autoescape=True,
        auto_reload=config.auto_reload,
    )

    if filters:
        env.update_filters(filters)

    for name, value in (globals_ or {}).items():
        env.add_global(name, value)

    return env


class KidaRenderer:
    """Render a resource path with kida.

    A resource path with no template behind it raises ``RenderError``
    chained from kida's ``TemplateNotFoundError``. Errors inside a
    template (``UndefinedError``, ``TemplateRuntimeError``, ...)
    propagate as kida raised them.
    """

    __slots__ = ("_env",)

    def __init__(self, env: Environment) -> None:
        self._env = env

    @property
    def env(self) -> Environment:
        return self._env

    def __call__(self, resource_path: str, model: dict[str, Any], /) -> str:
        logger.debug("kida render %s", resource_path)
        try:
            template = self._env.get_template(resource_path)
        except TemplateNotFoundError as exc:
            raise RenderError(resource_path, "template not found") from exc
        return template.render(model)
