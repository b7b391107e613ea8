"""``drape resolve`` — show how identifiers resolve.

Resolves an import string to a ViewResolver and prints, for each
identifier, whether it would be decorated and with which resources.
"""

import argparse
import sys

from drape.cli._resolve import parse_params, resolve_views
from drape.errors import ConfigurationError

_HEADERS = ("IDENTIFIER", "DECORATE", "TEMPLATE", "CONTENT", "TITLE KEY")


def run_resolve(args: argparse.Namespace) -> None:
    """Print a resolution table for ``args.identifiers``."""
    try:
        params = parse_params(args.param)
        views = resolve_views(args.views)
    except (ModuleNotFoundError, AttributeError, TypeError, ValueError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    rows: list[tuple[str, ...]] = []
    for identifier in args.identifiers:
        resolved, decision = views.explain(identifier, params)
        template_path = (
            views.resolver.build_path(decision.template_name)
            if decision.decorate and decision.template_name
            else "-"
        )
        rows.append(
            (
                identifier,
                "yes" if decision.decorate else "no",
                template_path,
                resolved.content_path,
                resolved.title_key,
            )
        )

    widths = [max(len(row[i]) for row in (_HEADERS, *rows)) for i in range(len(_HEADERS))]
    fmt = "  ".join(f"{{:<{w}}}" for w in widths[:-1]) + "  {}"
    print(fmt.format(*_HEADERS))
    print("-" * min(sum(widths) + 2 * (len(widths) - 1), 80))
    for row in rows:
        print(fmt.format(*row))
