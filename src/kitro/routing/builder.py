"""Route table construction from a pages directory.

Walks the pages directory and turns every page file into a
:class:`RouteRecord`:

- ``index.py`` maps to its directory's URL; other files append their stem
- ``[name]`` segments become ``:name`` parameters
- ``[...name]`` segments become the ``*`` catch-all
- files and directories starting with ``_`` or ``.`` are private

The resulting table is sorted static-first so the matcher can take the
first hit.
"""

import logging
import re
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

import anyio

from kitro.config import KitroConfig
from kitro.errors import RouteDiscoveryError
from kitro.routing.loader import ModulePageLoader, PageLoader
from kitro.routing.route import ApiRoute, RouteRecord, is_dynamic_path

logger = logging.getLogger("kitro.routing")

# [...name] -> *   (must run before the single-bracket rule)
_CATCH_ALL_RE = re.compile(r"\[\.\.\.([^\]]+)\]")

# [name] -> :name
_PARAM_RE = re.compile(r"\[([^\]]+)\]")

_INDEX = "index"


async def build_routes(
    pages_dir: str | Path,
    config: KitroConfig,
    *,
    loader: PageLoader | None = None,
) -> list[RouteRecord]:
    """Resolve every page file under *pages_dir* into a sorted route table.

    Each page's ``layout`` export is read through *loader*. Reads run
    concurrently in worker threads; a failing read falls back to
    ``config.default_layout`` without affecting the other routes.

    Args:
        pages_dir: Root of the pages directory.
        config: Site configuration (page extensions, SSR flag, defaults).
        loader: Page loader. Defaults to a fresh :class:`ModulePageLoader`.

    Returns:
        Route records, static routes first, each group ordered by path.

    Raises:
        RouteDiscoveryError: If *pages_dir* cannot be enumerated.
    """
    loader = loader or ModulePageLoader()
    exclude = Path(config.api_dir).parts if config.api_dir else ()
    root, files = await anyio.to_thread.run_sync(
        _list_page_files, pages_dir, config.page_extensions, exclude
    )

    layouts: dict[Path, str] = {}
    async with anyio.create_task_group() as tg:
        for _relative, file in files:
            tg.start_soon(_read_layout, loader, file, config.default_layout, layouts)

    routes: list[RouteRecord] = []
    for relative, file in files:
        path = file_to_route_path(relative, config.page_extensions)
        routes.append(
            RouteRecord(
                path=path,
                file=file,
                name=route_name(path),
                layout=layouts[file],
                ssr=config.ssr,
            )
        )

    logger.debug("Resolved %d page routes from %s", len(routes), root)
    return sort_routes(routes)


def build_api_routes(pages_dir: str | Path, config: KitroConfig) -> list[ApiRoute]:
    """Resolve the API subtree of *pages_dir* into a sorted table.

    Files under ``<pages_dir>/<config.api_dir>`` follow the page path
    conventions, so ``api/hello.py`` serves ``/api/hello``. Handlers are
    loaded lazily when called, not here.

    Raises:
        RouteDiscoveryError: If *pages_dir* cannot be enumerated.
    """
    root = _pages_root(pages_dir)
    if not config.api_dir or not (root / config.api_dir).is_dir():
        return []

    prefix = Path(config.api_dir).as_posix()
    routes: list[ApiRoute] = []
    for relative, file in _enumerate_files(root / config.api_dir, config.page_extensions):
        path = file_to_route_path(f"{prefix}/{relative}", config.page_extensions)
        routes.append(ApiRoute(path=path, file=file, name=route_name(path)))
    return sort_routes(routes)


def file_to_route_path(relative: str, extensions: Sequence[str] = (".py",)) -> str:
    """Convert a page file's path relative to the pages root to a URL pattern.

    Examples::

        "index.py"            -> "/"
        "about.py"            -> "/about"
        "blog/index.py"       -> "/blog"
        "blog/[slug].py"      -> "/blog/:slug"
        "docs/[...rest].py"   -> "/docs/*"
    """
    path = relative.lstrip("/")
    for ext in extensions:
        if path.endswith(ext):
            path = path[: -len(ext)]
            break

    head, _, base = path.rpartition("/")
    if base == _INDEX:
        path = f"/{head}" if head else "/"
    else:
        path = f"/{path}"

    path = _CATCH_ALL_RE.sub("*", path)
    path = _PARAM_RE.sub(r":\1", path)

    if path == "/index":
        path = "/"
    if path.endswith("/index"):
        path = path[: -len("/index")] or "/"
    return path


def route_name(path: str) -> str:
    """Derive a route identifier from its path: ``/blog/:slug`` -> ``blog-slug``."""
    if path == "/":
        return _INDEX
    return path[1:].replace("/", "-").replace(":", "")


def sort_routes[R: (RouteRecord, ApiRoute)](routes: Iterable[R]) -> list[R]:
    """Order routes static-first, then dynamic and catch-all, each by path."""
    return sorted(routes, key=lambda route: (is_dynamic_path(route.path), route.path))


def _pages_root(pages_dir: str | Path) -> Path:
    root = Path(pages_dir).resolve()
    if not root.is_dir():
        msg = f"Pages directory not found: {root}"
        raise RouteDiscoveryError(msg)
    return root


def _list_page_files(
    pages_dir: str | Path,
    extensions: Sequence[str],
    exclude: tuple[str, ...],
) -> tuple[Path, list[tuple[str, Path]]]:
    """Resolve the pages root and list its page files. Runs in a worker thread."""
    root = _pages_root(pages_dir)
    return root, list(_enumerate_files(root, extensions, exclude=exclude))


def _enumerate_files(
    root: Path,
    extensions: Sequence[str],
    *,
    exclude: tuple[str, ...] = (),
) -> Iterator[tuple[str, Path]]:
    """Yield ``(relative_posix_path, absolute_path)`` for each page file.

    Anything under the *exclude* subdirectory (given as path parts) is
    skipped.
    """
    try:
        candidates = sorted(root.rglob("*"))
    except OSError as exc:
        msg = f"Cannot enumerate pages directory {root}: {exc}"
        raise RouteDiscoveryError(msg) from exc

    for item in candidates:
        relative = item.relative_to(root)
        if any(part.startswith(("_", ".")) for part in relative.parts):
            continue
        if exclude and relative.parts[: len(exclude)] == exclude:
            continue
        if not item.is_file() or not item.name.endswith(tuple(extensions)):
            continue
        yield relative.as_posix(), item


async def _read_layout(
    loader: PageLoader,
    file: Path,
    default: str,
    layouts: dict[Path, str],
) -> None:
    try:
        page = await anyio.to_thread.run_sync(loader.load_page, file)
    except Exception:
        logger.warning("Could not read layout from %s; using %r", file, default, exc_info=True)
        layouts[file] = default
        return
    layouts[file] = page.layout or default
