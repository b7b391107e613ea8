"""Partial-request detection.

Request handlers use these to pick a content-only identifier, or to
add the cancel parameter, when the browser asked for a page fragment
rather than a full page.
"""

from collections.abc import Mapping


def is_ajax_request(requested_with: str | None) -> bool:
    """True if an ``X-Requested-With`` value marks an XMLHttpRequest."""
    return requested_with == "XMLHttpRequest"


def is_partial_request(headers: Mapping[str, str]) -> bool:
    """True for classic AJAX or htmx requests.

    Checks ``X-Requested-With: XMLHttpRequest`` and ``HX-Request: true``.
    Header names are compared case-insensitively, so a plain ``dict``
    of raw headers works as well as a case-insensitive header mapping.
    """
    lowered = {name.lower(): value for name, value in headers.items()}
    if is_ajax_request(lowered.get("x-requested-with")):
        return True
    return lowered.get("hx-request") == "true"
