"""Kitro: file-routed pages and schema-described block composition.

A pages directory becomes an ordered route table; typed, schema-described
blocks compose authored instance trees into server-rendered HTML.

Basic usage::

    from kitro import App, KitroConfig

    app = App(KitroConfig(pages_dir="src/pages"))
    await app.startup()
    result = await app.render_path("/")

Blocks::

    from kitro import BlockInstance, define_block, h

    @define_block("heading", schema={"text": "string"}, category="content")
    def heading(props):
        return h("h2", None, props.get("text", ""))

    app.register_block(heading)
    html = app.render_blocks([BlockInstance("heading", {"text": "Hello"})])
"""

__version__ = "0.8.0"
__all__ = [
    "App",
    "BlockDefinition",
    "BlockInstance",
    "BlockMeta",
    "BlockRegistry",
    "Blockpack",
    "ConfigurationError",
    "Element",
    "Fragment",
    "KitroConfig",
    "KitroError",
    "MarketplaceRegistry",
    "PageDocument",
    "PageLoadError",
    "RouteDiscoveryError",
    "RouteRecord",
    "build_routes",
    "define_block",
    "h",
    "match",
    "register_default_blocks",
    "render_block",
    "render_html",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import kitro`` fast while providing a clean top-level API.
    """
    if name == "App":
        from kitro.app import App

        return App

    if name == "KitroConfig":
        from kitro.config import KitroConfig

        return KitroConfig

    if name in ("Element", "Fragment", "h", "render_html"):
        from kitro import nodes as _nodes

        return getattr(_nodes, name)

    if name in ("RouteRecord", "build_routes", "match"):
        from kitro import routing as _routing

        return getattr(_routing, name)

    if name in (
        "BlockDefinition",
        "BlockInstance",
        "BlockMeta",
        "BlockRegistry",
        "Blockpack",
        "MarketplaceRegistry",
        "PageDocument",
        "define_block",
        "register_default_blocks",
        "render_block",
    ):
        from kitro import blocks as _blocks

        return getattr(_blocks, name)

    if name in ("ConfigurationError", "KitroError", "PageLoadError", "RouteDiscoveryError"):
        from kitro import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
