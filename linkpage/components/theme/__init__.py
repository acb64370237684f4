"""
Theme component - Template, color, font and layout resolution.
"""

from ._impl import (
    COLOR_PRESETS,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE_TIER,
    DEFAULT_PAGE_WIDTH_TIER,
    DEFAULT_PRIMARY_COLOR,
    FONT_OPTIONS,
    FONT_SIZES,
    PAGE_WIDTHS,
    TEMPLATE_CATALOG,
    get_template,
    is_known_font,
    is_known_template,
    normalize_hex_color,
    resolve_theme,
)
from .component import run_catalog, run_resolve, run_resolve_for_profile
from .models import (
    BackgroundTreatment,
    ColorPreset,
    FontOption,
    ResolveThemeInput,
    ThemeCatalogOutput,
    ThemeParams,
)

__all__ = [
    # Entry points
    "run_resolve",
    "run_resolve_for_profile",
    "run_catalog",
    # Core
    "resolve_theme",
    "get_template",
    "is_known_template",
    "is_known_font",
    "normalize_hex_color",
    # Tables
    "TEMPLATE_CATALOG",
    "FONT_SIZES",
    "PAGE_WIDTHS",
    "FONT_OPTIONS",
    "COLOR_PRESETS",
    "DEFAULT_FONT_FAMILY",
    "DEFAULT_FONT_SIZE_TIER",
    "DEFAULT_PAGE_WIDTH_TIER",
    "DEFAULT_PRIMARY_COLOR",
    # Models
    "BackgroundTreatment",
    "ColorPreset",
    "FontOption",
    "ResolveThemeInput",
    "ThemeCatalogOutput",
    "ThemeParams",
]
