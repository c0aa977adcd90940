"""Kitro exception hierarchy.

Shared across the route builder, page loader, block registry and
renderer so every module raises and catches the same types.

A route that does not match and a block type that is not registered are
*not* errors: the matcher returns ``None`` and the block renderer emits a
placeholder node.
"""


class KitroError(Exception):
    """Base for all kitro-specific errors."""


class ConfigurationError(KitroError):
    """Raised when configuration or a block definition is invalid.

    Typically surfaces at startup, when blocks are defined and registered.
    """


class RouteDiscoveryError(KitroError):
    """Raised when the pages directory cannot be enumerated.

    Fatal: the caller is expected to abort startup.
    """


class PageLoadError(KitroError):
    """Raised when a page or API module cannot be loaded.

    The route builder recovers from it per file (falling back to the
    default layout); at render time it propagates to the caller.
    """

    def __init__(self, file: str, detail: str = "") -> None:
        self.file = file
        self.detail = detail
        message = f"Cannot load page module {file!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
