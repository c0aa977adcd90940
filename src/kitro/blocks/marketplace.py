"""Blockpacks: externally packaged bundles of block definitions.

A blockpack is admitted block by block. A block is skipped, with a
warning, when its name is already registered or its schema is empty;
the remaining blocks still load. The pack itself is always recorded.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from kitro.blocks.registry import BlockRegistry
from kitro.blocks.types import BlockDefinition

logger = logging.getLogger("kitro.blocks")


@dataclass(frozen=True, slots=True)
class Blockpack:
    """A named, versioned bundle of block definitions.

    ``blocks`` is copied to a tuple, so the pack cannot change after
    it is created.
    """

    name: str
    version: str
    blocks: Sequence[BlockDefinition] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "blocks", tuple(self.blocks))


class MarketplaceRegistry:
    """Admits blockpacks into a :class:`BlockRegistry`.

    Like the block registry, writes are not locked.
    """

    __slots__ = ("_packs", "_registry")

    def __init__(self, registry: BlockRegistry) -> None:
        self._registry = registry
        self._packs: dict[str, Blockpack] = {}

    @property
    def registry(self) -> BlockRegistry:
        return self._registry

    def register_blockpack(self, pack: Blockpack) -> tuple[str, ...]:
        """Register the valid blocks of *pack* and record the pack.

        Re-registering a pack name replaces the recorded pack; blocks
        admitted earlier stay registered.

        Returns:
            Names of the blocks admitted from this pack, in pack order.
        """
        admitted: list[str] = []
        for block in pack.blocks:
            name = block.meta.name
            if self._registry.get(name) is not None:
                logger.warning(
                    "Block %r from blockpack %r conflicts with an existing block. Skipping.",
                    name,
                    pack.name,
                )
                continue
            if not block.meta.schema:
                logger.warning(
                    "Block %r from blockpack %r has an empty schema. Skipping.",
                    name,
                    pack.name,
                )
                continue
            self._registry.register(block)
            admitted.append(name)

        self._packs[pack.name] = pack
        logger.info(
            "Blockpack %r %s registered: %d of %d blocks admitted",
            pack.name,
            pack.version,
            len(admitted),
            len(pack.blocks),
        )
        return tuple(admitted)

    def get_blockpack(self, name: str) -> Blockpack | None:
        """Look up a recorded pack by name."""
        return self._packs.get(name)

    def all_blockpacks(self) -> list[Blockpack]:
        """All recorded packs, in first-registration order."""
        return list(self._packs.values())
