"""Site configuration.

KitroConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class KitroConfig:
    """Site configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = KitroConfig(ssr=False, pages_dir="app/pages")
    """

    # Rendering
    ssr: bool = True
    title: str = "Kitro App"
    autoescape: bool = True
    debug: bool = False

    # Pages
    pages_dir: str | Path = "src/pages"
    page_extensions: tuple[str, ...] = (".py",)
    api_dir: str = "api"  # Subtree of pages_dir holding API handlers

    # Layouts
    layouts_dir: str | Path | None = "layouts"
    default_layout: str = "default"
