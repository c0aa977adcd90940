"""Routing: page directory resolution and first-match route lookup.

The route table is built once at startup by :func:`build_routes`, sorted
static-first, and consulted read-only by :func:`match` afterwards.

Conventions::

    pages/
      index.py            # /
      about.py            # /about
      blog/
        index.py          # /blog
        [slug].py         # /blog/:slug
      docs/
        [...rest].py      # /docs/*
      api/
        hello.py          # API handler at /api/hello
"""

from kitro.routing.builder import (
    build_api_routes,
    build_routes,
    file_to_route_path,
    route_name,
    sort_routes,
)
from kitro.routing.loader import ModulePageLoader, PageLoader, PageModule, StaticPageLoader
from kitro.routing.matcher import compile_pattern, match, resolve
from kitro.routing.route import ApiRoute, RouteMatch, RouteRecord

__all__ = [
    "ApiRoute",
    "ModulePageLoader",
    "PageLoader",
    "PageModule",
    "RouteMatch",
    "RouteRecord",
    "StaticPageLoader",
    "build_api_routes",
    "build_routes",
    "compile_pattern",
    "file_to_route_path",
    "match",
    "resolve",
    "route_name",
    "sort_routes",
]
