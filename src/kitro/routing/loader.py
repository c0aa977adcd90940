"""Page module loading.

The route builder and the page renderer never import page files
themselves; they go through a :class:`PageLoader`. Production code uses
:class:`ModulePageLoader`, which executes ``.py`` files by path the same
way filesystem discovery always has. Tests inject a
:class:`StaticPageLoader` holding in-memory page definitions.
"""

import importlib.util
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any, Protocol

from kitro.errors import PageLoadError

# Module attribute names recognised in page and API files
PAGE_FACTORY_ATTR = "page"
LAYOUT_ATTR = "layout"
API_HANDLER_ATTR = "handler"


@dataclass(frozen=True, slots=True)
class PageModule:
    """What a page file exports.

    Attributes:
        factory: Zero-argument callable returning the page's root node,
            or ``None`` when the module defines no ``page()``.
        layout: Layout override from the module's ``layout`` attribute.
        handler: API handler, for files under the API subtree.
    """

    factory: Callable[[], Any] | None = None
    layout: str | None = None
    handler: Callable[..., Any] | None = None


class PageLoader(Protocol):
    """Loads the exports of a page or API file."""

    def load_page(self, file: Path) -> PageModule: ...


class ModulePageLoader:
    """Execute page files with ``importlib`` and cache the result per path.

    Loads may happen from worker threads while the route table is built,
    so the cache is guarded by a lock.
    """

    __slots__ = ("_cache", "_lock")

    def __init__(self) -> None:
        self._cache: dict[Path, PageModule] = {}
        self._lock = threading.Lock()

    def load_page(self, file: Path) -> PageModule:
        """Load *file* and extract its page exports.

        Raises:
            PageLoadError: If the file cannot be imported.
        """
        key = Path(file).resolve()
        with self._lock:
            cached = self._cache.get(key)
        if cached is not None:
            return cached

        module = _exec_module(key)
        page = _page_module_from(module)

        with self._lock:
            self._cache.setdefault(key, page)
            return self._cache[key]

    def clear(self) -> None:
        """Forget cached modules so the next load re-executes the files."""
        with self._lock:
            self._cache.clear()


class StaticPageLoader:
    """In-memory loader mapping file paths to prepared page modules.

    Usage::

        loader = StaticPageLoader({
            pages / "index.py": PageModule(factory=lambda: h("h1", None, "Hi")),
        })
    """

    __slots__ = ("_pages",)

    def __init__(self, pages: Mapping[str | Path, PageModule]) -> None:
        self._pages = {Path(file).resolve(): page for file, page in pages.items()}

    def load_page(self, file: Path) -> PageModule:
        page = self._pages.get(Path(file).resolve())
        if page is None:
            raise PageLoadError(str(file), "not registered with this loader")
        return page


def _exec_module(file: Path) -> ModuleType:
    module_name = f"_kitro_page_{file.stem}_{abs(hash(file))}"
    spec = importlib.util.spec_from_file_location(module_name, file)
    if spec is None or spec.loader is None:
        raise PageLoadError(str(file), "no import spec")

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise PageLoadError(str(file), f"{type(exc).__name__}: {exc}") from exc
    return module


def _page_module_from(module: ModuleType) -> PageModule:
    factory = getattr(module, PAGE_FACTORY_ATTR, None)
    handler = getattr(module, API_HANDLER_ATTR, None)
    layout = getattr(module, LAYOUT_ATTR, None)
    return PageModule(
        factory=factory if callable(factory) else None,
        layout=layout if isinstance(layout, str) and layout else None,
        handler=handler if callable(handler) else None,
    )
