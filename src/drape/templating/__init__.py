"""Templating — kida integration for decorated views."""

from drape.templating.integration import KidaRenderer, create_environment

__all__ = ["KidaRenderer", "create_environment"]
