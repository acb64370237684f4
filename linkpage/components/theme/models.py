"""
Theme component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Direction = Literal["ltr", "rtl"]
Side = Literal["left", "right"]

# --- Catalog Entries ---


@dataclass(frozen=True)
class BackgroundTreatment:
    """Page background selected by a template."""

    template_id: str
    label: str
    gradient_from: str
    gradient_to: str
    is_dark: bool = False


@dataclass(frozen=True)
class FontOption:
    name: str
    value: str


@dataclass(frozen=True)
class ColorPreset:
    name: str
    primary: str
    background: str


# --- Input Models ---


@dataclass(frozen=True)
class ResolveThemeInput:
    """Raw theme settings as stored on a profile."""

    template_id: str | None = None
    primary_color: str | None = None
    background_color: str | None = None
    font_family: str | None = None
    font_size_tier: str | None = None
    page_width_tier: str | None = None
    is_rtl: bool = False


# --- Output Models ---


@dataclass(frozen=True)
class ThemeParams:
    """Fully resolved, render-ready theme."""

    template_id: str
    background: BackgroundTreatment
    primary_color: str
    background_color: str | None
    font_family: str
    font_size_tier: str
    font_size: str
    page_width_tier: str
    page_width: str

    direction: Direction
    start_side: Side
    end_side: Side

    heading_color: str
    text_color: str
    muted_text_color: str
    card_border_color: str
    link_background: str
    link_border: str
    text_block_background: str

    # Inputs that were replaced by a default, e.g. ("template", "font_size")
    fallbacks: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_rtl(self) -> bool:
        return self.direction == "rtl"

    @property
    def is_dark(self) -> bool:
        return self.background.is_dark


@dataclass(frozen=True)
class ThemeCatalogOutput:
    """Everything a profile editor can offer."""

    templates: tuple[BackgroundTreatment, ...]
    fonts: tuple[FontOption, ...]
    color_presets: tuple[ColorPreset, ...]
    font_size_tiers: tuple[str, ...]
    page_width_tiers: tuple[str, ...]
