"""Request-side helpers: parameter maps and partial-request detection."""

from drape.http.partial import is_ajax_request, is_partial_request
from drape.http.query import QueryParams

__all__ = ["QueryParams", "is_ajax_request", "is_partial_request"]
