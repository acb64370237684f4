"""
Theme component - Theme resolution entry points.

No collaborators: every entry point is a pure function of its input.
"""

from __future__ import annotations

from linkpage.domain.entities import Profile

from ._impl import resolve_theme, resolve_theme_input, theme_catalog
from .models import ResolveThemeInput, ThemeCatalogOutput, ThemeParams


def run_resolve(inp: ResolveThemeInput) -> ThemeParams:
    """Resolve raw theme settings."""
    return resolve_theme_input(inp)


def run_resolve_for_profile(profile: Profile) -> ThemeParams:
    """Resolve the theme stored on a profile."""
    return resolve_theme(
        template_id=profile.template,
        primary_color=profile.primary_color,
        background_color=profile.background_color,
        font_family=profile.font_family,
        font_size_tier=profile.font_size,
        page_width_tier=profile.page_width,
        is_rtl=profile.is_rtl,
    )


def run_catalog() -> ThemeCatalogOutput:
    """Templates, fonts, presets and tiers offered to the profile editor."""
    return theme_catalog()
