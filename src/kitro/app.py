"""The kitro App: route tables, block registry and renderers in one place.

The app owns exactly one :class:`BlockRegistry` and one page loader and
passes them explicitly to everything that needs them. Route tables are
built by :meth:`App.startup` and swapped in whole; requests only read
them.

Usage::

    app = App(KitroConfig(pages_dir="src/pages"))
    app.register_block(heading)
    await app.startup()

    result = await app.render_path("/blog/hello")
    result.status  # 200, or 404 with a rendered not-found page
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import anyio

from kitro.blocks.marketplace import Blockpack, MarketplaceRegistry
from kitro.blocks.registry import BlockRegistry
from kitro.blocks.renderer import render_document
from kitro.blocks.types import BlockDefinition, BlockInstance, PageDocument
from kitro.config import KitroConfig
from kitro.errors import PageLoadError
from kitro.nodes import render_html
from kitro.pages.api import ApiContext, call_api
from kitro.pages.environment import create_environment
from kitro.pages.renderer import render_not_found, render_page
from kitro.routing.builder import build_api_routes, build_routes
from kitro.routing.loader import ModulePageLoader, PageLoader
from kitro.routing.matcher import match, resolve
from kitro.routing.route import ApiRoute, RouteRecord

logger = logging.getLogger("kitro.pages")


@dataclass(frozen=True, slots=True)
class PageResult:
    """Outcome of rendering a request path."""

    status: int
    html: str
    route: RouteRecord | None = None


@dataclass(frozen=True, slots=True)
class ApiResult:
    """Outcome of dispatching an API request path."""

    status: int
    body: Any = None


class App:
    """A kitro site.

    Args:
        config: Site configuration. Defaults to ``KitroConfig()``.
        registry: Block registry to use. A fresh one is created if omitted.
        loader: Page loader. Defaults to :class:`ModulePageLoader`.
    """

    def __init__(
        self,
        config: KitroConfig | None = None,
        *,
        registry: BlockRegistry | None = None,
        loader: PageLoader | None = None,
    ) -> None:
        self.config = config or KitroConfig()
        self.registry = registry if registry is not None else BlockRegistry()
        self.marketplace = MarketplaceRegistry(self.registry)
        self.loader = loader if loader is not None else ModulePageLoader()
        self.env = create_environment(self.config)
        self._routes: tuple[RouteRecord, ...] = ()
        self._api_routes: tuple[ApiRoute, ...] = ()
        self._started = False

    # -- Blocks --

    def register_block(self, definition: BlockDefinition) -> BlockDefinition:
        """Register a block definition. Returns it, so it works as a decorator."""
        self.registry.register(definition)
        return definition

    def register_blockpack(self, pack: Blockpack) -> tuple[str, ...]:
        """Admit a blockpack's valid blocks. Returns the admitted names."""
        return self.marketplace.register_blockpack(pack)

    def render_blocks(self, document: PageDocument | Iterable[BlockInstance]) -> str:
        """Render a page document (or a list of instances) to HTML."""
        return render_html(render_document(self.registry, document))

    # -- Routing --

    async def startup(self, pages_dir: str | Path | None = None) -> list[RouteRecord]:
        """Build the page and API route tables.

        Calling it again rebuilds both tables from scratch.

        Raises:
            RouteDiscoveryError: If the pages directory cannot be enumerated.
        """
        pages_dir = pages_dir if pages_dir is not None else self.config.pages_dir
        routes = await build_routes(pages_dir, self.config, loader=self.loader)
        api_routes = await anyio.to_thread.run_sync(build_api_routes, pages_dir, self.config)

        self._routes = tuple(routes)
        self._api_routes = tuple(api_routes)
        self._started = True
        logger.info("%d page routes, %d API routes", len(routes), len(api_routes))
        return routes

    @property
    def routes(self) -> tuple[RouteRecord, ...]:
        return self._routes

    @property
    def api_routes(self) -> tuple[ApiRoute, ...]:
        return self._api_routes

    def match(self, path: str) -> RouteRecord | None:
        """Return the page route for *path*, or ``None``."""
        self._check_started()
        return match(self._routes, path)

    # -- Requests --

    async def render_path(self, path: str) -> PageResult:
        """Render the page for *path*.

        A missing route yields a 404 result with the not-found page.
        Failures inside the page module propagate.
        """
        route = self.match(path)
        if route is None:
            return PageResult(status=404, html=render_not_found(self.env, path))

        page = await anyio.to_thread.run_sync(self.loader.load_page, route.file)
        return PageResult(status=200, html=render_page(self.env, route, page), route=route)

    async def call_api(self, path: str, request: Any = None) -> ApiResult:
        """Dispatch *path* to its API handler.

        A missing route yields a 404 result. Handler exceptions propagate.
        """
        self._check_started()
        found = resolve(self._api_routes, path)
        if found is None:
            return ApiResult(status=404, body={"error": "Not Found"})

        module = await anyio.to_thread.run_sync(self.loader.load_page, found.route.file)
        if module.handler is None:
            raise PageLoadError(str(found.route.file), "module defines no handler()")

        context = ApiContext(request=request, params=dict(found.params))
        body = await call_api(module.handler, context)
        return ApiResult(status=200, body=body)

    def _check_started(self) -> None:
        if not self._started:
            msg = "App.startup() must run before requests are served."
            raise RuntimeError(msg)
