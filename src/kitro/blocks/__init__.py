"""Blocks: schema-described renderable units and their composition.

Usage::

    from kitro.blocks import BlockInstance, BlockRegistry, define_block, render_block
    from kitro.nodes import h, render_html

    @define_block("heading", schema={"text": "string"}, category="content")
    def heading(props):
        return h("h2", {"class": props["variant"]}, props.get("text", ""))

    registry = BlockRegistry()
    registry.register(heading)
    node = render_block(registry, BlockInstance("heading", {"text": "Hi"}))
    html = render_html(node)
"""

from kitro.blocks.builtin import register_default_blocks
from kitro.blocks.marketplace import Blockpack, MarketplaceRegistry
from kitro.blocks.registry import BlockRegistry
from kitro.blocks.renderer import (
    fetch_server_data,
    render_block,
    render_block_async,
    render_document,
    unknown_block,
)
from kitro.blocks.types import (
    AICapabilities,
    BlockDefinition,
    BlockInstance,
    BlockMeta,
    BlockServerContext,
    PageDocument,
    define_block,
)

__all__ = [
    "AICapabilities",
    "BlockDefinition",
    "BlockInstance",
    "BlockMeta",
    "BlockRegistry",
    "BlockServerContext",
    "Blockpack",
    "MarketplaceRegistry",
    "PageDocument",
    "define_block",
    "fetch_server_data",
    "register_default_blocks",
    "render_block",
    "render_block_async",
    "render_document",
    "unknown_block",
]
