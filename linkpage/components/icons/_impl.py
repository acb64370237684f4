"""
IconResolver - Link icon source + style to a renderable icon descriptor.

Functional Core - pure business logic.

Key behaviors:
- "custom" with an image URL wraps the image, shaped by the icon style
- Any other source is looked up in the built-in catalog
- Unknown sources (and "custom" without a URL) fall back to the generic glyph
- Icon style is applied independently of the source lookup
"""

from __future__ import annotations

from linkpage.domain.entities import CUSTOM_ICON_SOURCE, DEFAULT_ICON_SOURCE, IconStyle

from .models import (
    GlyphIcon,
    GlyphTreatment,
    IconCatalogEntry,
    IconDescriptor,
    ImageIcon,
    ImageShape,
    ResolveIconInput,
)

# --- Catalog ---


ICON_CATALOG: tuple[IconCatalogEntry, ...] = (
    IconCatalogEntry("instagram", "instagram", "Instagram", "#E4405F"),
    IconCatalogEntry("x", "twitter", "X (formerly Twitter)", "#000000"),
    IconCatalogEntry("facebook", "facebook", "Facebook", "#1877F2"),
    IconCatalogEntry("linkedin", "linkedin", "LinkedIn", "#0077B5"),
    IconCatalogEntry("youtube", "youtube", "YouTube", "#FF0000"),
    IconCatalogEntry("github", "github", "GitHub", "#333333"),
    IconCatalogEntry("website", "globe", "Website", "#4285F4"),
    IconCatalogEntry("email", "mail", "Email", "#EA4335"),
    IconCatalogEntry("phone", "phone", "Phone", "#34A853"),
    IconCatalogEntry("location", "map-pin", "Location", "#FBBC05"),
    IconCatalogEntry(DEFAULT_ICON_SOURCE, "external-link", "Default", "#6B7280"),
)

# Older records still carry the pre-rename source name
ICON_ALIASES: dict[str, str] = {"twitter": "x"}

FALLBACK_ENTRY = ICON_CATALOG[-1]

_CATALOG_BY_SOURCE = {entry.source: entry for entry in ICON_CATALOG}

_IMAGE_SHAPES: dict[IconStyle, ImageShape] = {
    IconStyle.ROUNDED: "circle",
    IconStyle.SQUARE: "square",
    IconStyle.FILLED: "rounded",
    IconStyle.OUTLINED: "rounded",
}

_GLYPH_TREATMENTS: dict[IconStyle, GlyphTreatment] = {
    IconStyle.OUTLINED: "outlined",
    IconStyle.FILLED: "filled",
    IconStyle.ROUNDED: "plain",
    IconStyle.SQUARE: "plain",
}


# --- Lookups ---


def parse_icon_style(value: str | IconStyle | None) -> IconStyle:
    """Unknown or missing styles read as the default (filled)."""
    if isinstance(value, IconStyle):
        return value
    try:
        return IconStyle(value)
    except ValueError:
        return IconStyle.FILLED


def lookup_source(icon_source: str | None) -> IconCatalogEntry:
    source = ICON_ALIASES.get(icon_source or "", icon_source or "")
    return _CATALOG_BY_SOURCE.get(source, FALLBACK_ENTRY)


def is_known_source(icon_source: str | None) -> bool:
    if icon_source == CUSTOM_ICON_SOURCE:
        return True
    source = ICON_ALIASES.get(icon_source or "", icon_source or "")
    return source in _CATALOG_BY_SOURCE


# --- Resolver ---


def resolve_icon(
    icon_source: str | None,
    icon_style: str | IconStyle | None,
    custom_icon_url: str | None,
    primary_color: str | None = None,
    alt: str = "",
) -> IconDescriptor:
    """
    Resolve a link's icon.

    Args:
        icon_source: Catalog source key or "custom".
        icon_style: One of IconStyle; unknown values read as filled.
        custom_icon_url: Uploaded image, used only for the custom source.
        primary_color: Glyph color override; defaults
            to the source's brand color.
        alt: Alt text for image icons.
    """
    style = parse_icon_style(icon_style)

    if icon_source == CUSTOM_ICON_SOURCE and custom_icon_url:
        return ImageIcon(image_url=custom_icon_url, shape=_IMAGE_SHAPES[style], alt=alt)

    entry = lookup_source(icon_source)
    return GlyphIcon(
        source=entry.source,
        glyph=entry.glyph,
        label=entry.label,
        treatment=_GLYPH_TREATMENTS[style],
        color=primary_color or entry.brand_color,
    )


def resolve_icon_input(inp: ResolveIconInput) -> IconDescriptor:
    return resolve_icon(
        icon_source=inp.icon_source,
        icon_style=inp.icon_style,
        custom_icon_url=inp.custom_icon_url,
        primary_color=inp.primary_color,
        alt=inp.alt,
    )
