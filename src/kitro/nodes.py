"""Inspectable render-tree nodes and their HTML serialization.

Block and page render functions return plain values instead of opaque
widget objects, so a rendered tree can be compared, snapshotted and
walked without a rendering backend:

- ``str``: text, escaped on output
- ``Markup``: pre-escaped HTML, emitted as-is
- :class:`Element`: a tag with props and children
- :class:`Fragment`: an ordered group of sibling nodes

Usage::

    node = h("section", {"class": "hero"}, h("h1", None, title))
    html = render_html(node)
"""

import html
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from kida.utils.html import Markup

# Elements serialized without a closing tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


@dataclass(frozen=True, slots=True)
class Element:
    """An HTML element with props and child nodes.

    Attributes:
        tag: Element name (e.g. ``"div"``).
        props: Attribute mapping. ``True`` renders a bare attribute,
            ``False`` and ``None`` omit it, a mapping under ``"style"``
            renders as a declaration list.
        children: Child nodes in document order.
    """

    tag: str
    props: dict[str, Any] = field(default_factory=dict)
    children: tuple["Node", ...] = ()


@dataclass(frozen=True, slots=True)
class Fragment:
    """An ordered group of sibling nodes with no wrapping element."""

    children: tuple["Node", ...] = ()


type Node = Element | Fragment | str | None


def h(tag: str, props: Mapping[str, Any] | None = None, *children: Any) -> Element:
    """Build an :class:`Element`, flattening list/tuple children.

    Numbers are converted to text; ``None`` and ``False`` children are
    dropped so conditional children read naturally::

        h("ul", None, [h("li", None, item) for item in items])
    """
    return Element(tag=tag, props=dict(props or {}), children=tuple(_flatten(children)))


def _flatten(children: Iterable[Any]) -> Iterable["Node"]:
    for child in children:
        if child is None or child is False or child is True:
            continue
        if isinstance(child, (list, tuple)):
            yield from _flatten(child)
        elif isinstance(child, (int, float)):
            yield str(child)
        else:
            yield child


def render_html(node: Any) -> Markup:
    """Serialize a node tree to HTML.

    Text is escaped, ``Markup`` passes through untouched.

    Raises:
        TypeError: If the tree contains a value that is not a node.
    """
    parts: list[str] = []
    _write(node, parts)
    return Markup("".join(parts))


def _write(node: Any, out: list[str]) -> None:
    if node is None or node is False or node is True:
        return
    if isinstance(node, Markup):
        out.append(str(node))
    elif isinstance(node, str):
        out.append(html.escape(node, quote=False))
    elif isinstance(node, (int, float)):
        out.append(str(node))
    elif isinstance(node, Fragment):
        for child in node.children:
            _write(child, out)
    elif isinstance(node, Element):
        out.append(f"<{node.tag}{render_attrs(node.props)}>")
        if node.tag in VOID_ELEMENTS:
            return
        for child in node.children:
            _write(child, out)
        out.append(f"</{node.tag}>")
    elif isinstance(node, (list, tuple)):
        for child in node:
            _write(child, out)
    else:
        msg = f"Cannot render {type(node).__name__} as HTML"
        raise TypeError(msg)


def render_attrs(props: Mapping[str, Any]) -> str:
    """Serialize element props to an attribute string with a leading space."""
    attrs: list[str] = []
    for name, value in props.items():
        if value is None or value is False:
            continue
        if value is True:
            attrs.append(f" {name}")
            continue
        if name == "style" and isinstance(value, Mapping):
            value = "; ".join(f"{k}: {v}" for k, v in value.items())
        attrs.append(f' {name}="{html.escape(str(value), quote=True)}"')
    return "".join(attrs)
