"""
Icons component - Data models.

An icon descriptor is either an uploaded image or a built-in glyph.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

ImageShape = Literal["circle", "square", "rounded"]
GlyphTreatment = Literal["filled", "outlined", "plain"]


@dataclass(frozen=True)
class IconCatalogEntry:
    """Built-in icon source."""

    source: str
    glyph: str
    label: str
    brand_color: str


@dataclass(frozen=True)
class ImageIcon:
    """User-uploaded icon image."""

    image_url: str
    shape: ImageShape
    alt: str = ""
    kind: Literal["image"] = field(default="image", init=False)
    source: str = field(default="custom", init=False)


@dataclass(frozen=True)
class GlyphIcon:
    """Glyph from the built-in catalog."""

    source: str
    glyph: str
    label: str
    treatment: GlyphTreatment
    color: str
    kind: Literal["glyph"] = field(default="glyph", init=False)


IconDescriptor = ImageIcon | GlyphIcon


@dataclass(frozen=True)
class ResolveIconInput:
    icon_source: str | None
    icon_style: str | None = None
    custom_icon_url: str | None = None
    primary_color: str | None = None
    alt: str = ""
