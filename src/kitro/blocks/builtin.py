"""Built-in blocks shipped with kitro.

Two sets:

- core blocks: ``HeadingBlock``, ``HeroBlock``, ``TextBlock``
- official blocks: ``SectionBlock``, ``ButtonBlock``, ``ImageBlock``,
  ``GalleryBlock``, ``TwoColumnBlock``, ``CardBlock``, ``DonationBlock``

Importing this module registers nothing. Call
:func:`register_default_blocks` with the registry that should hold them::

    registry = BlockRegistry()
    register_default_blocks(registry)

Every block reads its variant from ``props["variant"]`` and falls back to
its first declared variant for unknown or missing values. Inline styles
are emitted as ``style`` mappings.
"""

from typing import Any

from kitro.blocks.registry import BlockRegistry
from kitro.blocks.types import AICapabilities, BlockDefinition, define_block
from kitro.nodes import Element, h

_TEXT_COLOR = "#e5e7eb"
_PANEL_BACKGROUND = "rgba(15, 23, 42, 0.96)"
_PANEL_BORDER = "1px solid rgba(30, 64, 175, 0.4)"
_ACCENT_GRADIENT = "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"
_BUTTON_GRADIENT = "linear-gradient(120deg, #a855f7, #ec4899, #22c55e)"

_GAPS = {"sm": "8px", "md": "16px", "lg": "24px"}


def _variant(props: dict[str, Any], styles: dict[str, dict[str, str]], default: str) -> dict[str, str]:
    return styles.get(props.get("variant") or default, styles[default])


# ---------------------------------------------------------------------------
# Core blocks
# ---------------------------------------------------------------------------


@define_block(
    "HeadingBlock",
    label="Heading",
    icon="📰",
    category="content",
    schema={"text": "string", "level": "number"},
    ai=AICapabilities(enhance=True),
)
def heading_block(props: dict[str, Any]) -> Element:
    try:
        level = int(props.get("level") or 1)
    except (TypeError, ValueError):
        level = 1
    level = min(max(level, 1), 6)
    size = {1: "32px", 2: "24px"}.get(level, "20px")
    return h(
        f"h{level}",
        {"style": {"font-size": size, "font-weight": "600", "color": _TEXT_COLOR}},
        props.get("text"),
    )


@define_block(
    "HeroBlock",
    label="Hero",
    icon="🎯",
    category="content",
    schema={"title": "string", "subtitle": "string"},
    ai=AICapabilities(enhance=True),
)
def hero_block(props: dict[str, Any]) -> Element:
    subtitle = props.get("subtitle")
    return h(
        "div",
        {
            "style": {
                "padding": "60px 20px",
                "text-align": "center",
                "background": _ACCENT_GRADIENT,
                "border-radius": "16px",
            }
        },
        h(
            "h1",
            {"style": {"font-size": "48px", "font-weight": "700", "margin": "0 0 16px", "color": "#fff"}},
            props.get("title"),
        ),
        subtitle
        and h(
            "p",
            {"style": {"font-size": "20px", "color": "rgba(255,255,255,0.9)", "margin": "0"}},
            subtitle,
        ),
    )


@define_block(
    "TextBlock",
    label="Text",
    icon="📝",
    category="content",
    schema={"text": "text"},
    ai=AICapabilities(enhance=True, translate=True),
)
def text_block(props: dict[str, Any]) -> Element:
    return h(
        "p",
        {"style": {"font-size": "16px", "line-height": "1.6", "color": _TEXT_COLOR}},
        props.get("text"),
    )


# ---------------------------------------------------------------------------
# Official blocks
# ---------------------------------------------------------------------------

_SECTION_VARIANTS = {
    "default": {"background": "#020617", "color": _TEXT_COLOR},
    "dark": {"background": "#000", "color": _TEXT_COLOR},
    "accent": {"background": _ACCENT_GRADIENT, "color": "#fff"},
}
_SECTION_PADDING = {"none": "0", "sm": "20px", "md": "40px", "lg": "80px"}


@define_block(
    "SectionBlock",
    label="Section",
    icon="📦",
    category="layout",
    variants=("default", "dark", "accent"),
    schema={"title": "string", "subtitle": "string", "variant": "string", "padding": "string"},
)
def section_block(props: dict[str, Any]) -> Element:
    """A full-width band. Child blocks render as its following siblings."""
    style = {
        **_variant(props, _SECTION_VARIANTS, "default"),
        "padding": _SECTION_PADDING.get(props.get("padding") or "md", "40px"),
    }
    title, subtitle = props.get("title"), props.get("subtitle")
    return h(
        "section",
        {"style": style},
        title and h("h2", {"style": {"margin-top": "0"}}, title),
        subtitle and h("p", {"style": {"opacity": "0.8"}}, subtitle),
    )


_BUTTON_VARIANTS = {
    "primary": {"background": _BUTTON_GRADIENT, "color": "#020617", "border": "none"},
    "secondary": {"background": _PANEL_BACKGROUND, "color": _TEXT_COLOR, "border": _PANEL_BORDER},
    "ghost": {"background": "transparent", "color": _TEXT_COLOR, "border": _PANEL_BORDER},
}
_BUTTON_SIZES = {
    "sm": {"padding": "6px 12px", "font-size": "12px"},
    "md": {"padding": "8px 16px", "font-size": "14px"},
    "lg": {"padding": "12px 24px", "font-size": "16px"},
}


@define_block(
    "ButtonBlock",
    label="Button",
    icon="🔘",
    category="content",
    variants=("primary", "secondary", "ghost"),
    schema={"text": "string", "href": "string", "variant": "string", "size": "string"},
    ai=AICapabilities(enhance=True),
)
def button_block(props: dict[str, Any]) -> Element:
    """A link when ``href`` is set, otherwise a ``<button>``."""
    style = {
        **_variant(props, _BUTTON_VARIANTS, "primary"),
        **_BUTTON_SIZES.get(props.get("size") or "md", _BUTTON_SIZES["md"]),
        "border-radius": "8px",
        "cursor": "pointer",
        "font-weight": "500",
        "display": "inline-block",
        "text-decoration": "none",
    }
    href = props.get("href")
    if href:
        return h("a", {"href": href, "style": style}, props.get("text"))
    return h("button", {"type": "button", "style": style}, props.get("text"))


_IMAGE_VARIANTS = {
    "default": {"border-radius": "0"},
    "rounded": {"border-radius": "12px"},
    "circle": {"border-radius": "50%"},
}


@define_block(
    "ImageBlock",
    label="Image",
    icon="🖼️",
    category="media",
    variants=("default", "rounded", "circle"),
    schema={"src": "string", "alt": "string", "width": "number", "height": "number", "variant": "string"},
    ai=AICapabilities(enhance=True),
)
def image_block(props: dict[str, Any]) -> Element:
    return h(
        "img",
        {
            "src": props.get("src"),
            "alt": props.get("alt") or "",
            "width": props.get("width"),
            "height": props.get("height"),
            "style": {
                "max-width": "100%",
                "height": "auto",
                **_variant(props, _IMAGE_VARIANTS, "default"),
            },
        },
    )


@define_block(
    "GalleryBlock",
    label="Gallery",
    icon="🖼️",
    category="media",
    # images is a list of {"src", "alt"} objects; editors store it as a string field
    schema={"images": "string", "columns": "number", "gap": "string"},
)
def gallery_block(props: dict[str, Any]) -> Element:
    images = props.get("images")
    if not isinstance(images, (list, tuple)):
        images = []
    return h(
        "div",
        {
            "style": {
                "display": "grid",
                "grid-template-columns": f"repeat({props.get('columns') or 3}, 1fr)",
                "gap": _GAPS.get(props.get("gap") or "md", _GAPS["md"]),
            }
        },
        [
            h(
                "img",
                {
                    "src": image.get("src"),
                    "alt": image.get("alt") or "",
                    "style": {"width": "100%", "height": "auto", "border-radius": "8px"},
                },
            )
            for image in images
            if isinstance(image, dict)
        ],
    )


_COLUMN_RATIOS = {"50-50": "1fr 1fr", "60-40": "3fr 2fr", "40-60": "2fr 3fr"}
_COLUMN_GAPS = {"sm": "16px", "md": "24px", "lg": "40px"}


@define_block(
    "TwoColumnBlock",
    label="Two Column",
    icon="📐",
    category="layout",
    schema={"ratio": "string", "gap": "string"},
)
def two_column_block(props: dict[str, Any]) -> Element:
    """Two grid columns holding the ``left`` and ``right`` nodes."""
    return h(
        "div",
        {
            "style": {
                "display": "grid",
                "grid-template-columns": _COLUMN_RATIOS.get(props.get("ratio") or "50-50", "1fr 1fr"),
                "gap": _COLUMN_GAPS.get(props.get("gap") or "md", _COLUMN_GAPS["md"]),
            }
        },
        h("div", None, props.get("left")),
        h("div", None, props.get("right")),
    )


_CARD_VARIANTS = {
    "default": {
        "background": _PANEL_BACKGROUND,
        "border": _PANEL_BORDER,
        "box-shadow": "0 18px 50px rgba(15, 23, 42, 0.9)",
    },
    "elevated": {
        "background": _PANEL_BACKGROUND,
        "border": "none",
        "box-shadow": "0 24px 70px rgba(15, 23, 42, 0.95)",
    },
    "outlined": {
        "background": "transparent",
        "border": "2px solid rgba(30, 64, 175, 0.6)",
        "box-shadow": "none",
    },
}


@define_block(
    "CardBlock",
    label="Card",
    icon="🃏",
    category="content",
    variants=("default", "elevated", "outlined"),
    schema={
        "title": "string",
        "subtitle": "string",
        "content": "text",
        "image": "string",
        "variant": "string",
    },
)
def card_block(props: dict[str, Any]) -> Element:
    title = props.get("title")
    subtitle = props.get("subtitle")
    content = props.get("content")
    image = props.get("image")
    return h(
        "div",
        {
            "style": {
                **_variant(props, _CARD_VARIANTS, "default"),
                "border-radius": "16px",
                "padding": "20px",
                "color": _TEXT_COLOR,
            }
        },
        image
        and h(
            "img",
            {
                "src": image,
                "alt": title or "",
                "style": {"width": "100%", "border-radius": "8px", "margin-bottom": "16px"},
            },
        ),
        title and h("h3", {"style": {"margin-top": "0", "margin-bottom": "8px"}}, title),
        subtitle
        and h("p", {"style": {"opacity": "0.7", "margin-bottom": "12px", "font-size": "14px"}}, subtitle),
        content and h("p", {"style": {"line-height": "1.6"}}, content),
    )


DONATION_TITLE = "Enjoying Kitro?"
DONATION_DESCRIPTION = (
    "If Kitro helps you build better websites, you can support the project "
    "by buying us a coffee. Your donation helps fund servers and new features."
)
DONATION_BUTTON_LABEL = "Buy us a coffee ☕"


@define_block(
    "DonationBlock",
    label="Donation",
    icon="☕",
    category="content",
    schema={
        "title": "string",
        "description": "text",
        "buttonLabel": "string",
        "paymentLinkUrl": "string",
    },
)
def donation_block(props: dict[str, Any]) -> Element:
    """A support panel linking to ``paymentLinkUrl``.

    Without a payment link the panel renders dimmed, with a notice in
    place of the button.
    """
    title = props.get("title", DONATION_TITLE)
    description = props.get("description", DONATION_DESCRIPTION)
    label = props.get("buttonLabel") or DONATION_BUTTON_LABEL
    link = (props.get("paymentLinkUrl") or "").strip()
    disabled = not link

    if disabled:
        action = h(
            "div",
            {
                "style": {
                    "padding": "12px 24px",
                    "border-radius": "8px",
                    "background": "rgba(107, 114, 128, 0.2)",
                    "color": "#6b7280",
                    "cursor": "not-allowed",
                    "display": "inline-block",
                }
            },
            "Donation link not configured yet",
        )
    else:
        action = h(
            "a",
            {
                "href": link,
                "target": "_blank",
                "rel": "noopener noreferrer",
                "style": {
                    "background": _BUTTON_GRADIENT,
                    "color": "#020617",
                    "border-radius": "8px",
                    "padding": "12px 24px",
                    "font-size": "16px",
                    "font-weight": "500",
                    "display": "inline-block",
                    "text-decoration": "none",
                },
            },
            label,
        )

    return h(
        "div",
        {
            "class": "kitro-donation",
            "data-disabled": disabled,
            "style": {
                "background": "rgba(15, 23, 42, 0.5)" if disabled else _PANEL_BACKGROUND,
                "border": "1px solid rgba(30, 64, 175, 0.2)" if disabled else _PANEL_BORDER,
                "box-shadow": "none" if disabled else "0 18px 50px rgba(15, 23, 42, 0.9)",
                "border-radius": "16px",
                "padding": "32px",
                "color": "#6b7280" if disabled else _TEXT_COLOR,
                "text-align": "center",
                "max-width": "600px",
                "margin": "0 auto",
            },
        },
        title and h("h2", {"style": {"margin-top": "0", "margin-bottom": "16px", "font-size": "24px"}}, title),
        description
        and h(
            "p",
            {"style": {"margin-bottom": "24px", "line-height": "1.6", "opacity": "0.6" if disabled else "0.9"}},
            description,
        ),
        action,
    )


CORE_BLOCKS: tuple[BlockDefinition, ...] = (heading_block, hero_block, text_block)

OFFICIAL_BLOCKS: tuple[BlockDefinition, ...] = (
    section_block,
    button_block,
    image_block,
    gallery_block,
    two_column_block,
    card_block,
    donation_block,
)

DEFAULT_BLOCKS: tuple[BlockDefinition, ...] = OFFICIAL_BLOCKS + CORE_BLOCKS


def register_default_blocks(registry: BlockRegistry) -> tuple[str, ...]:
    """Register every built-in block into *registry*.

    Safe to call more than once: a block whose exact definition is
    already registered is left alone. A different definition under a
    built-in name is replaced, with the registry's overwrite warning.

    Returns:
        Names of the blocks registered by this call.
    """
    registered: list[str] = []
    for block in DEFAULT_BLOCKS:
        if registry.get(block.name) is block:
            continue
        registry.register(block)
        registered.append(block.name)
    return tuple(registered)
