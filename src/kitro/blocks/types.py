"""Block data model: metadata, definitions, instances and page documents.

Definitions describe a block *type* (what it is and how it renders);
instances are authored nodes that reference a type by name. Page
documents are the persisted form of an instance tree.
"""

import json
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from kitro.errors import ConfigurationError

type SchemaType = Literal["string", "text", "image", "number", "boolean"]
type Category = Literal["layout", "content", "media", "advanced"]

SCHEMA_TYPES: frozenset[str] = frozenset({"string", "text", "image", "number", "boolean"})
CATEGORIES: frozenset[str] = frozenset({"layout", "content", "media", "advanced"})


@dataclass(frozen=True, slots=True)
class AICapabilities:
    """Which AI-assisted editing features a block opts into."""

    enhance: bool = False
    translate: bool = False


@dataclass(frozen=True, slots=True)
class BlockMeta:
    """Static description of a block type.

    Attributes:
        name: Registry key, unique per registry.
        label: Display name for editors.
        schema: Prop name to one of ``string``, ``text``, ``image``,
            ``number``, ``boolean``.
        icon: Optional symbolic icon key.
        category: ``layout``, ``content``, ``media`` or ``advanced``.
        variants: Allowed variant identifiers, if the block has any.
        ai: Optional AI capability flags.

    Raises:
        ConfigurationError: On an unknown category or schema type.
    """

    name: str
    label: str
    schema: Mapping[str, SchemaType] = field(default_factory=dict)
    icon: str | None = None
    category: Category | None = None
    variants: tuple[str, ...] = ()
    ai: AICapabilities | None = None

    def __post_init__(self) -> None:
        if not self.name:
            msg = "Block name must not be empty"
            raise ConfigurationError(msg)
        if self.category is not None and self.category not in CATEGORIES:
            msg = (
                f"Block {self.name!r} has unknown category {self.category!r}. "
                f"Expected one of: {', '.join(sorted(CATEGORIES))}"
            )
            raise ConfigurationError(msg)
        for prop, kind in (self.schema or {}).items():
            if kind not in SCHEMA_TYPES:
                msg = (
                    f"Block {self.name!r} declares prop {prop!r} with unknown type {kind!r}. "
                    f"Expected one of: {', '.join(sorted(SCHEMA_TYPES))}"
                )
                raise ConfigurationError(msg)

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable catalog entry for editors."""
        data: dict[str, Any] = {
            "name": self.name,
            "label": self.label,
            "schema": dict(self.schema or {}),
        }
        if self.icon is not None:
            data["icon"] = self.icon
        if self.category is not None:
            data["category"] = self.category
        if self.variants:
            data["variants"] = list(self.variants)
        if self.ai is not None:
            data["ai"] = {"enhance": self.ai.enhance, "translate": self.ai.translate}
        return data


@dataclass(frozen=True, slots=True)
class BlockServerContext:
    """Request-scoped inputs handed to a block's ``server_data`` hook."""

    request: Any = None
    params: Mapping[str, str] = field(default_factory=dict)
    user: Any = None
    db: Any = None


type RenderFn = Callable[[dict[str, Any]], Any]
type ServerDataFn = Callable[[BlockServerContext], Any | Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class BlockDefinition:
    """A registrable block type.

    Attributes:
        meta: Static metadata, including the registry key.
        render: Pure function from merged props to an output node.
        server_data: Optional hook producing data to overlay on the
            props before rendering. May be sync or async.
        client_state: Client-side reactive state hook. Carried for
            editors and bundlers, never invoked on the server.
    """

    meta: BlockMeta
    render: RenderFn
    server_data: ServerDataFn | None = None
    client_state: Callable[[], Any] | None = None

    @property
    def name(self) -> str:
        return self.meta.name


def define_block(
    name: str,
    *,
    label: str | None = None,
    schema: Mapping[str, SchemaType] | None = None,
    icon: str | None = None,
    category: Category | None = None,
    variants: tuple[str, ...] = (),
    ai: AICapabilities | None = None,
    server_data: ServerDataFn | None = None,
) -> Callable[[RenderFn], BlockDefinition]:
    """Decorator turning a render function into a :class:`BlockDefinition`.

    Usage::

        @define_block("heading", schema={"text": "string"}, category="content")
        def heading(props):
            return h("h2", None, props.get("text", ""))

        registry.register(heading)
    """

    def decorator(render: RenderFn) -> BlockDefinition:
        meta = BlockMeta(
            name=name,
            label=label or name.replace("-", " ").title(),
            schema=dict(schema or {}),
            icon=icon,
            category=category,
            variants=tuple(variants),
            ai=ai,
        )
        return BlockDefinition(meta=meta, render=render, server_data=server_data)

    return decorator


@dataclass(frozen=True, slots=True)
class BlockInstance:
    """An authored block node: a type reference plus props and children.

    Constructed by callers (usually from a persisted page document) and
    handed to the renderer; the renderer never keeps it.
    """

    type: str
    props: Mapping[str, Any] = field(default_factory=dict)
    variant: str | None = None
    id: str | None = None
    children: tuple["BlockInstance", ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BlockInstance":
        """Build an instance tree from its JSON shape.

        Raises:
            ValueError: If *data* is not an object, ``type`` is missing,
                ``variant``/``id`` are not strings, or ``props``/``children``
                have the wrong shape.
        """
        if not isinstance(data, Mapping):
            msg = f"Block instance must be an object, got {type(data).__name__}"
            raise ValueError(msg)

        block_type = data.get("type")
        if not isinstance(block_type, str) or not block_type:
            msg = f"Block instance requires a non-empty 'type', got {block_type!r}"
            raise ValueError(msg)

        props = data.get("props") or {}
        if not isinstance(props, Mapping):
            msg = f"Block {block_type!r}: 'props' must be an object"
            raise ValueError(msg)

        children = data.get("children") or []
        if not isinstance(children, list):
            msg = f"Block {block_type!r}: 'children' must be an array"
            raise ValueError(msg)

        for key in ("variant", "id"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                msg = f"Block {block_type!r}: '{key}' must be a string, got {type(value).__name__}"
                raise ValueError(msg)

        return cls(
            type=block_type,
            props=dict(props),
            variant=data.get("variant"),
            id=data.get("id"),
            children=tuple(cls.from_dict(child) for child in children),
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON shape of this instance tree. Absent optionals are omitted."""
        data: dict[str, Any] = {"type": self.type, "props": dict(self.props)}
        if self.id is not None:
            data["id"] = self.id
        if self.variant is not None:
            data["variant"] = self.variant
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass(frozen=True, slots=True)
class PageDocument:
    """Persisted block tree for one page: ``{"path": ..., "blocks": [...]}``."""

    path: str
    blocks: tuple[BlockInstance, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PageDocument":
        """Build a document from its JSON shape.

        Raises:
            ValueError: If *data* or any block in it has the wrong shape.
        """
        if not isinstance(data, Mapping):
            msg = f"Page document must be an object, got {type(data).__name__}"
            raise ValueError(msg)

        path = data.get("path", "/")
        if not isinstance(path, str):
            msg = "Page document: 'path' must be a string"
            raise ValueError(msg)

        blocks = data.get("blocks") or []
        if not isinstance(blocks, list):
            msg = "Page document: 'blocks' must be an array"
            raise ValueError(msg)
        return cls(path=path, blocks=tuple(BlockInstance.from_dict(b) for b in blocks))

    @classmethod
    def from_json(cls, text: str | bytes) -> "PageDocument":
        return cls.from_dict(json.loads(text))

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "blocks": [block.to_dict() for block in self.blocks]}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)
