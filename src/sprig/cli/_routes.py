"""``sprig routes`` — list flattened routes.

Resolves an import string to a route map and prints every pattern with
its parameters and search-parameter capability.
"""

import argparse
import sys

from sprig.cli._resolve import resolve_routes
from sprig.routing.route import RouteEntry


def _format_params(entry: RouteEntry) -> str:
    names = [token.placeholder.removeprefix(":") for token in entry.tokens]
    return ", ".join(dict.fromkeys(names)) or "-"


def _format_search(entry: RouteEntry) -> str:
    if entry.search_params is None:
        return "-"
    return getattr(entry.search_params, "__qualname__", None) or repr(entry.search_params)


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATTERN, PARAMS, and SEARCH for ``args.target``."""
    try:
        routes = resolve_routes(args.target, args.basename)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = [
        (pattern, _format_params(entry), _format_search(entry))
        for pattern, entry in routes.items()
    ]

    # Column widths
    max_pattern = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header
    max_params = max(max(len(r[1]) for r in rows), 6)  # "PARAMS" header

    fmt = f"{{:<{max_pattern}}}  {{:<{max_params}}}  {{}}"
    print(fmt.format("PATTERN", "PARAMS", "SEARCH"))
    sep_len = max_pattern + max_params + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
