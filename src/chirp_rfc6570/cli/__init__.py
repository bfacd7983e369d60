"""chirp-rfc6570 CLI — inspect the URI templates of a route set.

Entry point registered as ``chirp-rfc6570`` in ``pyproject.toml``::

    [project.scripts]
    chirp-rfc6570 = "chirp_rfc6570.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``chirp-rfc6570`` command."""
    parser = argparse.ArgumentParser(
        prog="chirp-rfc6570",
        description="chirp-rfc6570 — RFC 6570 URI Templates for your routes.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- chirp-rfc6570 routes ----------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="Print route templates")
    routes_parser.add_argument(
        "routes",
        help="Import string (e.g. myapp.urls:routes)",
    )
    routes_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON object of name -> template",
    )
    routes_parser.add_argument(
        "--no-params",
        action="store_true",
        help="Omit query parameter expressions",
    )
    routes_parser.add_argument(
        "--ignore",
        action="append",
        default=None,
        metavar="NAME",
        help="Placeholder name to suppress (repeatable, default: format)",
    )
    routes_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "routes":
        from chirp_rfc6570.cli._routes import run_routes

        run_routes(args)
