"""Shared route-table loading for CLI commands."""

import argparse
import functools
import sys

import anyio

from kitro.config import KitroConfig
from kitro.errors import RouteDiscoveryError
from kitro.routing.builder import build_routes
from kitro.routing.route import RouteRecord


def load_routes(args: argparse.Namespace, config: KitroConfig) -> list[RouteRecord]:
    """Build the route table for ``args.pages_dir`` or exit with status 1."""
    try:
        return anyio.run(functools.partial(build_routes, args.pages_dir, config))
    except RouteDiscoveryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
