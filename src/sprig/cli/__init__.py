"""Sprig CLI — inspect flattened route tables.

Entry point registered as ``sprig`` in ``pyproject.toml``::

    [project.scripts]
    sprig = "sprig.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``sprig`` command."""
    parser = argparse.ArgumentParser(
        prog="sprig",
        description="Sprig — typed route trees flattened into path builders.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- sprig routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List flattened route patterns")
    routes_parser.add_argument(
        "target",
        help="Import string (e.g. myapp.routes:ROUTES)",
    )
    routes_parser.add_argument(
        "--basename",
        default="",
        help="Basename prepended to every pattern (declaration trees only)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from sprig.cli._routes import run_routes

        run_routes(args)
