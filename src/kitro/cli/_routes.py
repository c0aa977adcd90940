"""``kitro routes``: print the resolved route table.

Routes are listed in match order: static first, then dynamic.
"""

import argparse
from pathlib import Path

from kitro.cli._build import load_routes
from kitro.config import KitroConfig


def run_routes(args: argparse.Namespace) -> None:
    """Print PATH, NAME, LAYOUT, SSR and FILE for every route."""
    config = KitroConfig(ssr=not args.no_ssr, pages_dir=args.pages_dir)
    routes = load_routes(args, config)
    if not routes:
        print("No routes found.")
        return

    root = Path(args.pages_dir).resolve()
    rows = [
        (
            route.path,
            route.name,
            route.layout,
            "yes" if route.ssr else "no",
            route.file.relative_to(root).as_posix(),
        )
        for route in routes
    ]
    headers = ("PATH", "NAME", "LAYOUT", "SSR", "FILE")
    widths = [max(len(headers[i]), *(len(row[i]) for row in rows)) for i in range(4)]

    fmt = "  ".join(f"{{:<{w}}}" for w in widths) + "  {}"
    print(fmt.format(*headers))
    print("-" * min(sum(widths) + 8 + max(len(r[4]) for r in rows), 80))
    for row in rows:
        print(fmt.format(*row))
