"""Block registry: block type name to definition.

Mirrors the route table: definitions are frozen, the registry is a plain
mapping filled during startup and read concurrently afterwards. There is
no process-wide instance; the app owns one and passes it to the renderer.

Writes are not locked. Register everything before serving requests, or
serialize runtime registration yourself.
"""

import logging
from collections.abc import Iterator
from typing import Any

from kitro.blocks.types import BlockDefinition

logger = logging.getLogger("kitro.blocks")


class BlockRegistry:
    """Ordered mapping of block names to :class:`BlockDefinition`.

    Usage::

        registry = BlockRegistry()
        registry.register(heading)
        registry.get("heading")
    """

    __slots__ = ("_blocks",)

    def __init__(self) -> None:
        self._blocks: dict[str, BlockDefinition] = {}

    def register(self, definition: BlockDefinition) -> None:
        """Add *definition*, replacing any block of the same name.

        Replacement is logged, never raised.
        """
        name = definition.meta.name
        if name in self._blocks:
            logger.warning("Block %r is already registered. Overwriting.", name)
        self._blocks[name] = definition

    def get(self, name: str) -> BlockDefinition | None:
        """Look up a block by name. Returns ``None`` if not registered."""
        return self._blocks.get(name)

    def all(self) -> list[BlockDefinition]:
        """All definitions in registration order. A replaced block keeps its slot."""
        return list(self._blocks.values())

    def by_category(self, category: str) -> list[BlockDefinition]:
        """Definitions whose ``meta.category`` equals *category*."""
        return [block for block in self._blocks.values() if block.meta.category == category]

    def catalog(self) -> list[dict[str, Any]]:
        """JSON-serializable metadata for every block, for editors."""
        return [block.meta.to_dict() for block in self._blocks.values()]

    def clear(self) -> None:
        """Remove every definition."""
        self._blocks.clear()

    def __len__(self) -> int:
        return len(self._blocks)

    def __contains__(self, name: object) -> bool:
        return name in self._blocks

    def __iter__(self) -> Iterator[BlockDefinition]:
        return iter(list(self._blocks.values()))
