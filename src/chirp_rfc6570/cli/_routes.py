"""``chirp-rfc6570 routes`` — print the URI template of every route.

Resolves an import string to a RouteSet and prints a table of name,
action, and template, or a JSON object keyed by route name.
"""

import argparse
import json
import sys

from chirp_rfc6570.cli._resolve import resolve_params_source, resolve_routes
from chirp_rfc6570.config import CompileOptions
from chirp_rfc6570.errors import StructuralError


def _options(args: argparse.Namespace) -> CompileOptions:
    options = CompileOptions(params=not args.no_params)
    if args.ignore is not None:
        options = options.with_overrides(ignore=frozenset(args.ignore))
    if options.params:
        options = options.with_overrides(params_source=resolve_params_source(args.routes))
    return options


def run_routes(args: argparse.Namespace) -> None:
    """Print the templates of the RouteSet named by ``args.routes``.

    Unnamed routes are keyed by their position in JSON output.
    """
    try:
        route_set = resolve_routes(args.routes)
        options = _options(args)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = route_set.routes
    if not routes:
        print("No routes registered.")
        return

    # Build rows: (name, action, template)
    rows: list[tuple[str, str, str]] = []
    for index, route in enumerate(routes):
        try:
            template = route.to_rfc6570(options)
        except StructuralError as exc:
            print(f"Error: route {route.spec}: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc
        rows.append((route.name or str(index), route.identifier or "-", template.pattern))

    if args.json:
        print(json.dumps({name: template for name, _, template in rows}, indent=2))
        return

    # Column widths
    max_name = max(max(len(r[0]) for r in rows), 4)  # "NAME" header
    max_action = max(max(len(r[1]) for r in rows), 6)  # "ACTION" header

    fmt = f"{{:<{max_name}}}  {{:<{max_action}}}  {{}}"
    print(fmt.format("NAME", "ACTION", "TEMPLATE"))
    sep_len = max_name + max_action + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for name, action, template in rows:
        print(fmt.format(name, action, template))
