"""``drape check`` — template mapping validation command.

Resolves an import string to a ViewResolver. Building one compiles
every pattern key, so a malformed mapping fails here. Prints the
mapping in search order and exits with code 1 on any error.
"""

import argparse
import sys

from drape.cli._resolve import resolve_views
from drape.errors import ConfigurationError


def run_check(args: argparse.Namespace) -> None:
    """Validate the template mapping of a ViewResolver."""
    try:
        views = resolve_views(args.views)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    config = views.config
    mode = "patterns" if config.use_patterns else "exact"
    policy = "dynamic" if config.dynamic_templates else "static"
    print(f"Mapping ({mode}, {len(config.template_mapping)} entries):")
    for index, (key, template_name) in enumerate(config.template_mapping, start=1):
        print(f"  {index:>3}. {key} -> {template_name}")
    print(f"Default template: {config.default_template_name or '(none)'}")
    if config.cancel_value is None:
        print(f"Policy: {policy}, decoration cannot be cancelled")
    else:
        print(f"Policy: {policy}, {config.layout_param}={config.cancel_value} cancels decoration")
    print("OK")
