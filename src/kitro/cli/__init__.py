"""Kitro CLI: route table inspection.

Entry point registered as ``kitro`` in ``pyproject.toml``::

    [project.scripts]
    kitro = "kitro.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``kitro`` command."""
    parser = argparse.ArgumentParser(
        prog="kitro",
        description="Kitro: file-routed pages and block composition.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # -- kitro routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the resolved route table")
    routes_parser.add_argument("pages_dir", help="Path to the pages directory")
    routes_parser.add_argument(
        "--no-ssr",
        action="store_true",
        help="Resolve routes as client-rendered",
    )

    # -- kitro check ------------------------------------------------------
    check_parser = subparsers.add_parser(
        "check",
        help="Report page files that resolve to the same path",
    )
    check_parser.add_argument("pages_dir", help="Path to the pages directory")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from kitro.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from kitro.cli._check import run_check

        run_check(args)
