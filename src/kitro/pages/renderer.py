"""Page rendering: page factory output wrapped in its layout.

For SSR routes the page's ``page()`` factory is called, its node tree
serialized, and the HTML placed into the route's layout. Non-SSR routes
render the layout around an empty mount point for the client to fill.
"""

import logging

from kida import Environment
from kida.utils.html import Markup

from kitro.errors import PageLoadError
from kitro.nodes import render_html
from kitro.routing.loader import PageModule
from kitro.routing.route import RouteRecord

logger = logging.getLogger("kitro.pages")


def render_page(env: Environment, route: RouteRecord, page: PageModule) -> str:
    """Render *page* for *route* inside its layout.

    Raises:
        PageLoadError: If an SSR page module defines no ``page()``.
        Exception: Whatever the page factory or layout raises.
    """
    if route.ssr:
        if page.factory is None:
            raise PageLoadError(str(route.file), "module defines no page() factory")
        content = render_html(page.factory())
    else:
        content = Markup("")

    template = env.get_template(f"{route.layout}.html")
    return template.render({"content": content, "title": route.name, "route": route})


def render_not_found(env: Environment, path: str) -> str:
    """Render the 404 page for *path*. Never raises for a missing route."""
    logger.debug("No page matches %r", path)
    template = env.get_template("404.html")
    return template.render({"path": path})
