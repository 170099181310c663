"""Zenit CLI — inspect a route table and try lookups against it.

Entry point registered as ``zenit`` in ``pyproject.toml``::

    [project.scripts]
    zenit = "zenit.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``zenit`` command."""
    parser = argparse.ArgumentParser(
        prog="zenit",
        description="Zenit — a small URL routing table.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for the zenit loggers (defaults to the router's config)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- zenit routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "router",
        help="Import string (e.g. myapp.urls:router)",
    )

    # -- zenit match ------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Look up a method and path")
    match_parser.add_argument(
        "router",
        help="Import string (e.g. myapp.urls:router)",
    )
    match_parser.add_argument("method", help="HTTP method (e.g. GET)")
    match_parser.add_argument("path", help="Requested path (e.g. /users/42)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from zenit.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from zenit.cli._match import run_match

        run_match(args)


def configure_logging(level: str) -> None:
    """Send zenit log records to stderr at *level* (e.g. ``"debug"``)."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    logging.getLogger("zenit").setLevel(level.upper())
