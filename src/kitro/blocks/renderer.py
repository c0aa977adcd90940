"""Block composition: instance trees to output nodes.

Rendering is total over arbitrary instance trees. An instance whose type
is not registered becomes a visible placeholder instead of an error, so
a page that references a missing block degrades rather than failing.
Exceptions raised by a block's own ``render`` function propagate.

Props are merged in increasing precedence::

    {**instance.props, **server_data, "variant": instance.variant}

Children render as flat siblings after their parent, never receiving the
parent's server data.
"""

import inspect
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from kitro.blocks.registry import BlockRegistry
from kitro.blocks.types import BlockInstance, BlockServerContext, PageDocument
from kitro.nodes import Element, Fragment

logger = logging.getLogger("kitro.blocks")

PLACEHOLDER_CLASS = "kitro-unknown-block"


def render_block(
    registry: BlockRegistry,
    instance: BlockInstance,
    server_data: Mapping[str, Any] | None = None,
) -> Any:
    """Render *instance* and its children against *registry*.

    Args:
        registry: Where block types are looked up.
        instance: Root of the instance tree.
        server_data: Overlay for the root instance's props. Children
            never see it.

    Returns:
        The definition's output node, or a :class:`Fragment` of the
        parent's output followed by each child's output when the
        instance has children.
    """
    definition = registry.get(instance.type)
    if definition is None:
        return unknown_block(instance.type)

    variants = definition.meta.variants
    if instance.variant is not None and variants and instance.variant not in variants:
        logger.warning(
            "Block %r rendered with undeclared variant %r (declared: %s)",
            instance.type,
            instance.variant,
            ", ".join(variants),
        )

    props: dict[str, Any] = {**instance.props}
    if server_data:
        props.update(server_data)
    props["variant"] = instance.variant

    output = definition.render(props)
    if not instance.children:
        return output

    return Fragment(
        children=(
            output,
            *(render_block(registry, child) for child in instance.children),
        )
    )


def unknown_block(block_type: str) -> Element:
    """Placeholder node for an unregistered block type."""
    return Element(
        tag="div",
        props={"class": PLACEHOLDER_CLASS, "data-block-type": block_type},
        children=(f"Unknown block: {block_type}",),
    )


async def fetch_server_data(
    registry: BlockRegistry,
    instance: BlockInstance,
    context: BlockServerContext,
) -> Any:
    """Run the ``server_data`` hook of *instance*'s block type.

    Sync and async hooks are both supported. Returns ``None`` for
    unregistered types and blocks without a hook. Hook exceptions
    propagate.
    """
    definition = registry.get(instance.type)
    if definition is None or definition.server_data is None:
        return None
    result = definition.server_data(context)
    if inspect.isawaitable(result):
        result = await result
    return result


async def render_block_async(
    registry: BlockRegistry,
    instance: BlockInstance,
    context: BlockServerContext,
) -> Any:
    """Fetch the root instance's server data, then render the tree."""
    data = await fetch_server_data(registry, instance, context)
    return render_block(registry, instance, data)


def render_document(
    registry: BlockRegistry,
    document: PageDocument | Iterable[BlockInstance],
) -> Fragment:
    """Render every top-level block of a page document, in order."""
    blocks = document.blocks if isinstance(document, PageDocument) else document
    return Fragment(children=tuple(render_block(registry, block) for block in blocks))
