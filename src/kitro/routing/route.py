"""RouteRecord, ApiRoute and RouteMatch frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RouteRecord:
    """One resolved page file.

    Built once by ``build_routes()`` at startup and read concurrently by
    request handlers afterwards.

    Attributes:
        path: Canonical URL pattern (``/``, ``/blog/:slug``, ``/docs/*``).
        file: Absolute location of the page module.
        name: Identifier derived from the path (``blog-slug``).
        layout: Layout template identifier.
        ssr: Whether the page is rendered on the server.
        middleware: Middleware identifiers, in order. Not applied yet.
    """

    path: str
    file: Path
    name: str
    layout: str = "default"
    ssr: bool = True
    middleware: tuple[str, ...] = ()

    @property
    def is_dynamic(self) -> bool:
        """True when the path holds a ``:param`` or ``*`` marker."""
        return is_dynamic_path(self.path)


@dataclass(frozen=True, slots=True)
class ApiRoute:
    """An API handler file under the pages directory's API subtree."""

    path: str
    file: Path
    name: str

    @property
    def is_dynamic(self) -> bool:
        return is_dynamic_path(self.path)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful match.

    ``params`` maps each ``:name`` marker to its captured segment; a
    catch-all capture is stored under ``"*"``.
    """

    route: RouteRecord | ApiRoute
    params: Mapping[str, str] = field(default_factory=dict)


def is_dynamic_path(path: str) -> bool:
    """Return True if *path* contains a dynamic or catch-all marker."""
    return ":" in path or "*" in path
