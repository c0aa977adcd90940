"""Kida environment setup for page layouts.

Layouts are looked up as ``<layout>.html`` in ``config.layouts_dir``,
falling back to built-in ``default.html`` and ``404.html`` shells so a
site without a layouts directory still renders complete documents.

Layout context:
    content: Pre-rendered page HTML (``Markup``).
    title: Page title, from the route name.
    site_title: ``config.title``.
    route: The matched :class:`RouteRecord` (absent on 404 pages).
"""

from pathlib import Path

from kida import ChoiceLoader, DictLoader, Environment, FileSystemLoader

from kitro.config import KitroConfig

DEFAULT_LAYOUT = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{{ title }} | {{ site_title }}</title>
</head>
<body>
<div id="root">{{ content }}</div>
</body>
</html>
"""

NOT_FOUND_PAGE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>404 Not Found | {{ site_title }}</title>
</head>
<body>
<main class="kitro-not-found">
<h1>404 Not Found</h1>
<p>No page matches <code>{{ path }}</code>.</p>
</main>
</body>
</html>
"""

BUILTIN_TEMPLATES: dict[str, str] = {
    "default.html": DEFAULT_LAYOUT,
    "404.html": NOT_FOUND_PAGE,
}


def create_environment(config: KitroConfig) -> Environment:
    """Create the kida Environment used for layouts and error pages.

    Called once at startup. User layouts shadow the built-ins.
    """
    loaders = []
    if config.layouts_dir is not None and Path(config.layouts_dir).is_dir():
        loaders.append(FileSystemLoader(str(config.layouts_dir)))
    loaders.append(DictLoader(BUILTIN_TEMPLATES))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        auto_reload=config.debug,
    )
    env.add_global("site_title", config.title)
    return env
