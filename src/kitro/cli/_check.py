"""``kitro check``: report page files that collide on one URL path.

Two files such as ``blog/index.py`` and ``blog.py`` both resolve to
``/blog``. Both stay in the route table and the first in sort order wins
silently, so the collision is reported here instead. Exits with code 1
if any are found.
"""

import argparse
from collections import defaultdict
from pathlib import Path

from kitro.cli._build import load_routes
from kitro.config import KitroConfig


def run_check(args: argparse.Namespace) -> None:
    """Group routes by path and print every group with more than one file."""
    routes = load_routes(args, KitroConfig(pages_dir=args.pages_dir))
    root = Path(args.pages_dir).resolve()

    by_path: dict[str, list[str]] = defaultdict(list)
    for route in routes:
        by_path[route.path].append(route.file.relative_to(root).as_posix())

    duplicates = {path: files for path, files in by_path.items() if len(files) > 1}
    if not duplicates:
        print(f"{len(routes)} routes, no conflicts.")
        return

    for path, files in duplicates.items():
        print(f"{path} is served by {len(files)} files; {files[0]} wins:")
        for file in files:
            print(f"  {file}")
    raise SystemExit(1)
