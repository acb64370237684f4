"""
Icons component - Built-in and uploaded link icons.
"""

from ._impl import (
    FALLBACK_ENTRY,
    ICON_ALIASES,
    ICON_CATALOG,
    is_known_source,
    lookup_source,
    parse_icon_style,
    resolve_icon,
    resolve_icon_input,
)
from .models import (
    GlyphIcon,
    IconCatalogEntry,
    IconDescriptor,
    ImageIcon,
    ResolveIconInput,
)

__all__ = [
    "resolve_icon",
    "resolve_icon_input",
    "lookup_source",
    "is_known_source",
    "parse_icon_style",
    "ICON_CATALOG",
    "ICON_ALIASES",
    "FALLBACK_ENTRY",
    "GlyphIcon",
    "IconCatalogEntry",
    "IconDescriptor",
    "ImageIcon",
    "ResolveIconInput",
]
