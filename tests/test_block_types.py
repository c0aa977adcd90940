"""Tests for kitro.blocks.types — block metadata, definitions and documents."""

import json

import pytest

from kitro.blocks.types import (
    AICapabilities,
    BlockDefinition,
    BlockInstance,
    BlockMeta,
    PageDocument,
    define_block,
)
from kitro.errors import ConfigurationError
from kitro.nodes import h


class TestBlockMeta:
    def test_minimal(self) -> None:
        meta = BlockMeta(name="text", label="Text")
        assert meta.schema == {}
        assert meta.category is None
        assert meta.variants == ()
        assert meta.ai is None

    def test_full(self) -> None:
        meta = BlockMeta(
            name="hero",
            label="Hero",
            schema={"title": "string", "image": "image", "count": "number"},
            icon="star",
            category="layout",
            variants=("dark", "light"),
            ai=AICapabilities(enhance=True),
        )
        assert meta.ai is not None
        assert meta.ai.enhance is True
        assert meta.ai.translate is False

    def test_unknown_category_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown category 'widgets'"):
            BlockMeta(name="x", label="X", category="widgets")  # type: ignore[arg-type]

    def test_unknown_schema_type_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="'color'"):
            BlockMeta(name="x", label="X", schema={"tint": "color"})  # type: ignore[dict-item]

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            BlockMeta(name="", label="Nameless")

    def test_frozen(self) -> None:
        meta = BlockMeta(name="x", label="X")
        with pytest.raises(AttributeError):
            meta.name = "y"  # type: ignore[misc]

    def test_to_dict_omits_absent_optionals(self) -> None:
        meta = BlockMeta(name="text", label="Text", schema={"body": "text"})
        assert meta.to_dict() == {"name": "text", "label": "Text", "schema": {"body": "text"}}

    def test_to_dict_full(self) -> None:
        meta = BlockMeta(
            name="hero",
            label="Hero",
            schema={"title": "string"},
            icon="star",
            category="layout",
            variants=("dark",),
            ai=AICapabilities(enhance=True, translate=True),
        )
        data = meta.to_dict()
        assert data["icon"] == "star"
        assert data["category"] == "layout"
        assert data["variants"] == ["dark"]
        assert data["ai"] == {"enhance": True, "translate": True}
        json.dumps(data)


class TestDefineBlock:
    def test_builds_definition(self) -> None:
        @define_block("call-to-action", schema={"text": "string"}, category="content")
        def cta(props: dict) -> object:
            return h("a", {"class": "cta"}, props.get("text"))

        assert isinstance(cta, BlockDefinition)
        assert cta.name == "call-to-action"
        assert cta.meta.label == "Call To Action"
        assert cta.meta.category == "content"
        assert cta.server_data is None
        assert cta.client_state is None

    def test_explicit_label_and_hook(self) -> None:
        async def load(ctx: object) -> dict:
            return {}

        @define_block("feed", label="News feed", schema={"limit": "number"}, server_data=load)
        def feed(props: dict) -> object:
            return None

        assert feed.meta.label == "News feed"
        assert feed.server_data is load

    def test_validation_applies(self) -> None:
        with pytest.raises(ConfigurationError):

            @define_block("bad", category="nope")  # type: ignore[arg-type]
            def bad(props: dict) -> object:
                return None


class TestBlockInstance:
    def test_positional_type_and_props(self) -> None:
        instance = BlockInstance("heading", {"text": "Hi"})
        assert instance.type == "heading"
        assert instance.props == {"text": "Hi"}
        assert instance.children == ()
        assert instance.variant is None
        assert instance.id is None

    def test_from_dict_nested(self) -> None:
        instance = BlockInstance.from_dict(
            {
                "id": "b1",
                "type": "section",
                "variant": "wide",
                "props": {"title": "Intro"},
                "children": [
                    {"type": "text", "props": {"body": "one"}},
                    {"type": "text", "props": {"body": "two"}, "children": []},
                ],
            }
        )
        assert instance.id == "b1"
        assert instance.variant == "wide"
        assert [child.props["body"] for child in instance.children] == ["one", "two"]

    def test_from_dict_defaults(self) -> None:
        instance = BlockInstance.from_dict({"type": "text"})
        assert instance.props == {}
        assert instance.children == ()

    def test_from_dict_requires_type(self) -> None:
        with pytest.raises(ValueError, match="'type'"):
            BlockInstance.from_dict({"props": {}})

    def test_from_dict_rejects_bad_props(self) -> None:
        with pytest.raises(ValueError, match="props"):
            BlockInstance.from_dict({"type": "text", "props": ["a"]})

    def test_from_dict_rejects_bad_children(self) -> None:
        with pytest.raises(ValueError, match="children"):
            BlockInstance.from_dict({"type": "text", "children": {"type": "x"}})

    @pytest.mark.parametrize("data", ["hero", ["hero"], 3, None])
    def test_from_dict_rejects_non_object(self, data: object) -> None:
        with pytest.raises(ValueError, match="must be an object"):
            BlockInstance.from_dict(data)  # type: ignore[arg-type]

    def test_from_dict_rejects_non_object_child(self) -> None:
        with pytest.raises(ValueError, match="must be an object"):
            BlockInstance.from_dict({"type": "section", "children": ["text"]})

    @pytest.mark.parametrize("key", ["variant", "id"])
    def test_from_dict_rejects_non_string_optionals(self, key: str) -> None:
        with pytest.raises(ValueError, match=f"'{key}' must be a string"):
            BlockInstance.from_dict({"type": "text", key: 7})

    def test_to_dict_omits_absent_optionals(self) -> None:
        assert BlockInstance("text", {"body": "x"}).to_dict() == {
            "type": "text",
            "props": {"body": "x"},
        }


class TestPageDocument:
    _JSON = """
    {
      "path": "/about",
      "blocks": [
        {"id": "h", "type": "heading", "props": {"text": "About us"}},
        {"type": "section", "props": {}, "children": [
          {"type": "text", "props": {"body": "Hello"}}
        ]}
      ]
    }
    """

    def test_from_json(self) -> None:
        document = PageDocument.from_json(self._JSON)
        assert document.path == "/about"
        assert [block.type for block in document.blocks] == ["heading", "section"]
        assert document.blocks[1].children[0].props == {"body": "Hello"}

    def test_json_shape_preserved(self) -> None:
        document = PageDocument.from_json(self._JSON)
        assert json.loads(document.to_json()) == json.loads(self._JSON)

    def test_empty_blocks(self) -> None:
        document = PageDocument.from_dict({"path": "/"})
        assert document.blocks == ()

    def test_blocks_must_be_list(self) -> None:
        with pytest.raises(ValueError, match="blocks"):
            PageDocument.from_dict({"path": "/", "blocks": "nope"})

    def test_non_object_block_entry(self) -> None:
        with pytest.raises(ValueError, match="must be an object"):
            PageDocument.from_json('{"path": "/", "blocks": ["hero"]}')

    def test_non_object_root(self) -> None:
        with pytest.raises(ValueError, match="Page document must be an object"):
            PageDocument.from_json("[]")

    def test_path_must_be_string(self) -> None:
        with pytest.raises(ValueError, match="path"):
            PageDocument.from_dict({"path": 1, "blocks": []})

    def test_malformed_json(self) -> None:
        with pytest.raises(ValueError):
            PageDocument.from_json("{not json")
