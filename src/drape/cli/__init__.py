"""Drape CLI — inspect view resolution from the command line.

Entry point registered as ``drape`` in ``pyproject.toml``::

    [project.scripts]
    drape = "drape.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``drape`` command."""
    parser = argparse.ArgumentParser(
        prog="drape",
        description="Drape — layout decoration for logical views.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- drape resolve ----------------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Show the template and decision for view identifiers",
    )
    resolve_parser.add_argument(
        "views",
        help="Import string of a ViewResolver (e.g. myapp.views:views)",
    )
    resolve_parser.add_argument("identifiers", nargs="+", help="Logical view identifiers")
    resolve_parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Request parameter to decide with (repeatable)",
    )

    # -- drape check ------------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate the template mapping")
    check_parser.add_argument(
        "views",
        help="Import string of a ViewResolver (e.g. myapp.views:views)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "resolve":
        from drape.cli._explain import run_resolve

        run_resolve(args)
    elif args.command == "check":
        from drape.cli._check import run_check

        run_check(args)
