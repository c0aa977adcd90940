"""Server-side page rendering with kida layouts.

Usage::

    env = create_environment(config)
    html = render_page(env, route, loader.load_page(route.file))
"""

from kitro.pages.api import ApiContext, call_api
from kitro.pages.environment import create_environment
from kitro.pages.renderer import render_not_found, render_page

__all__ = [
    "ApiContext",
    "call_api",
    "create_environment",
    "render_not_found",
    "render_page",
]
