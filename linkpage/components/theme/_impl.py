"""
ThemeResolver - Template/color/font/layout selection to render parameters.

Functional Core - pure business logic.

Key behaviors:
- Tiered options map through fixed lookup tables
- Unknown template ids resolve to the first catalog template
- Unknown tiers resolve to "medium" / "normal"
- Invalid colors resolve to the default primary / no background override
- Text direction mirrors directional spacing only; colors and fonts are unaffected
- Never raises on a bad stored value: rendering must not be blocked by theme data
"""

from __future__ import annotations

import re

from .models import (
    BackgroundTreatment,
    ColorPreset,
    FontOption,
    ResolveThemeInput,
    ThemeCatalogOutput,
    ThemeParams,
)

# --- Lookup Tables ---


TEMPLATE_CATALOG: tuple[BackgroundTreatment, ...] = (
    BackgroundTreatment("designer", "Designer", "#FAF5FF", "#FDF2F8"),
    BackgroundTreatment("developer", "Developer", "#111827", "#1F2937", is_dark=True),
    BackgroundTreatment("doctor", "Doctor", "#F0FDF4", "#EFF6FF"),
    BackgroundTreatment("trainer", "Trainer", "#FFF7ED", "#FEF2F2"),
    BackgroundTreatment("business", "Business", "#F9FAFB", "#EFF6FF"),
    BackgroundTreatment("artist", "Artist", "#FAF5FF", "#FDF2F8"),
    BackgroundTreatment("photographer", "Photographer", "#EFF6FF", "#EEF2FF"),
    BackgroundTreatment("writer", "Writer", "#FEFCE8", "#FFF7ED"),
    BackgroundTreatment("chef", "Chef", "#FEF2F2", "#FFF7ED"),
    BackgroundTreatment("musician", "Musician", "#FAF5FF", "#EFF6FF"),
    BackgroundTreatment("teacher", "Teacher", "#F0FDF4", "#F0FDFA"),
    BackgroundTreatment("influencer", "Influencer", "#FDF2F8", "#FAF5FF"),
)

FONT_SIZES: dict[str, str] = {
    "small": "0.875rem",
    "medium": "1rem",
    "large": "1.125rem",
    "xl": "1.25rem",
}

PAGE_WIDTHS: dict[str, str] = {
    "narrow": "24rem",
    "normal": "28rem",
    "wide": "32rem",
    "full": "56rem",
}

FONT_OPTIONS: tuple[FontOption, ...] = (
    FontOption("Inter", "Inter, sans-serif"),
    FontOption("Poppins", "Poppins, sans-serif"),
    FontOption("Roboto", "Roboto, sans-serif"),
    FontOption("Open Sans", "Open Sans, sans-serif"),
    FontOption("Cairo", "Cairo, sans-serif"),
    FontOption("Tajawal", "Tajawal, sans-serif"),
)

COLOR_PRESETS: tuple[ColorPreset, ...] = (
    ColorPreset("Indigo", "#6366F1", "#F8FAFC"),
    ColorPreset("Violet", "#8B5CF6", "#FAF5FF"),
    ColorPreset("Blue", "#3B82F6", "#EFF6FF"),
    ColorPreset("Green", "#10B981", "#ECFDF5"),
    ColorPreset("Pink", "#EC4899", "#FDF2F8"),
    ColorPreset("Orange", "#F59E0B", "#FFFBEB"),
    ColorPreset("Red", "#EF4444", "#FEF2F2"),
    ColorPreset("Yellow", "#EAB308", "#FEFCE8"),
    ColorPreset("Cyan", "#06B6D4", "#F0F9FF"),
    ColorPreset("Gray", "#6B7280", "#F9FAFB"),
    ColorPreset("Gold", "#D97706", "#FFFBEB"),
    ColorPreset("Black", "#1F2937", "#F3F4F6"),
)

DEFAULT_FONT_SIZE_TIER = "medium"
DEFAULT_PAGE_WIDTH_TIER = "normal"
DEFAULT_PRIMARY_COLOR = "#6366F1"
DEFAULT_FONT_FAMILY = "Inter, sans-serif"

_TEMPLATES_BY_ID = {t.template_id: t for t in TEMPLATE_CATALOG}
_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Hex alpha suffixes applied to the primary color
LINK_BACKGROUND_ALPHA = "15"
LINK_BORDER_ALPHA = "30"
TEXT_BLOCK_BACKGROUND_ALPHA = "10"


# --- Helpers ---


def normalize_hex_color(value: str | None) -> str | None:
    """Return #RRGGBB (uppercase) for a #RGB/#RRGGBB string, otherwise None."""
    if not value:
        return None
    value = value.strip()
    if not _HEX_COLOR.match(value):
        return None
    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits.upper()}"


def with_alpha(color: str, alpha: str) -> str:
    """Append a two-digit hex alpha to a #RRGGBB color."""
    return f"{color}{alpha}"


def get_template(template_id: str | None) -> BackgroundTreatment:
    """Catalog lookup with first-entry fallback."""
    if template_id and template_id in _TEMPLATES_BY_ID:
        return _TEMPLATES_BY_ID[template_id]
    return TEMPLATE_CATALOG[0]


def is_known_template(template_id: str | None) -> bool:
    return bool(template_id) and template_id in _TEMPLATES_BY_ID


def is_known_font(font_family: str | None) -> bool:
    return any(option.value == font_family for option in FONT_OPTIONS)


# --- Resolver ---


def resolve_theme(
    template_id: str | None,
    primary_color: str | None,
    background_color: str | None,
    font_family: str | None,
    font_size_tier: str | None,
    page_width_tier: str | None,
    is_rtl: bool,
) -> ThemeParams:
    """
    Resolve stored theme settings into concrete render parameters.

    Same inputs always produce the same ThemeParams.
    """
    fallbacks: list[str] = []

    if not is_known_template(template_id):
        fallbacks.append("template")
    background = get_template(template_id)

    primary = normalize_hex_color(primary_color)
    if primary is None:
        fallbacks.append("primary_color")
        primary = DEFAULT_PRIMARY_COLOR

    page_background = normalize_hex_color(background_color)
    if background_color and page_background is None:
        fallbacks.append("background_color")

    family = font_family.strip() if font_family else ""
    if not family:
        fallbacks.append("font_family")
        family = DEFAULT_FONT_FAMILY

    size_tier = font_size_tier if font_size_tier in FONT_SIZES else DEFAULT_FONT_SIZE_TIER
    if size_tier != font_size_tier:
        fallbacks.append("font_size")

    width_tier = page_width_tier if page_width_tier in PAGE_WIDTHS else DEFAULT_PAGE_WIDTH_TIER
    if width_tier != page_width_tier:
        fallbacks.append("page_width")

    if background.is_dark:
        text_color, muted_text_color = "#FFFFFF", "#D1D5DB"
        card_border_color = "rgba(255, 255, 255, 0.2)"
    else:
        text_color, muted_text_color = "#1F2937", "#4B5563"
        card_border_color = "#E5E7EB"

    return ThemeParams(
        template_id=background.template_id,
        background=background,
        primary_color=primary,
        background_color=page_background,
        font_family=family,
        font_size_tier=size_tier,
        font_size=FONT_SIZES[size_tier],
        page_width_tier=width_tier,
        page_width=PAGE_WIDTHS[width_tier],
        direction="rtl" if is_rtl else "ltr",
        start_side="right" if is_rtl else "left",
        end_side="left" if is_rtl else "right",
        heading_color=primary,
        text_color=text_color,
        muted_text_color=muted_text_color,
        card_border_color=card_border_color,
        link_background=with_alpha(primary, LINK_BACKGROUND_ALPHA),
        link_border=with_alpha(primary, LINK_BORDER_ALPHA),
        text_block_background=with_alpha(primary, TEXT_BLOCK_BACKGROUND_ALPHA),
        fallbacks=tuple(fallbacks),
    )


def resolve_theme_input(inp: ResolveThemeInput) -> ThemeParams:
    return resolve_theme(
        template_id=inp.template_id,
        primary_color=inp.primary_color,
        background_color=inp.background_color,
        font_family=inp.font_family,
        font_size_tier=inp.font_size_tier,
        page_width_tier=inp.page_width_tier,
        is_rtl=inp.is_rtl,
    )


def theme_catalog() -> ThemeCatalogOutput:
    return ThemeCatalogOutput(
        templates=TEMPLATE_CATALOG,
        fonts=FONT_OPTIONS,
        color_presets=COLOR_PRESETS,
        font_size_tiers=tuple(FONT_SIZES),
        page_width_tiers=tuple(PAGE_WIDTHS),
    )
