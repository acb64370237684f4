"""
Unit tests for link icon resolution.
"""

import pytest

from linkpage.components.icons import (
    FALLBACK_ENTRY,
    GlyphIcon,
    ImageIcon,
    ResolveIconInput,
    is_known_source,
    parse_icon_style,
    resolve_icon,
    resolve_icon_input,
)
from linkpage.domain.entities import IconStyle


class TestCustomImages:
    @pytest.mark.parametrize(
        ("style", "shape"),
        [
            (IconStyle.ROUNDED, "circle"),
            (IconStyle.SQUARE, "square"),
            (IconStyle.FILLED, "rounded"),
            (IconStyle.OUTLINED, "rounded"),
        ],
    )
    def test_style_controls_image_shape(self, style, shape):
        icon = resolve_icon("custom", style, "https://cdn.example.com/me.png", alt="Me")

        assert isinstance(icon, ImageIcon)
        assert icon.shape == shape
        assert icon.image_url == "https://cdn.example.com/me.png"
        assert icon.alt == "Me"

    def test_custom_without_url_falls_back_to_generic_glyph(self):
        icon = resolve_icon("custom", "rounded", None)

        assert isinstance(icon, GlyphIcon)
        assert icon.glyph == FALLBACK_ENTRY.glyph


class TestCatalog:
    def test_known_source_uses_brand_color(self):
        icon = resolve_icon("github", "filled", None)

        assert isinstance(icon, GlyphIcon)
        assert icon.glyph == "github"
        assert icon.color == "#333333"
        assert icon.treatment == "filled"

    def test_primary_color_overrides_brand_color(self):
        icon = resolve_icon("instagram", "outlined", None, primary_color="#10B981")

        assert icon.color == "#10B981"
        assert icon.treatment == "outlined"

    def test_catalog_icon_ignores_custom_url(self):
        icon = resolve_icon("youtube", "filled", "https://cdn.example.com/me.png")

        assert isinstance(icon, GlyphIcon)
        assert icon.source == "youtube"

    def test_legacy_twitter_source_maps_to_x(self):
        icon = resolve_icon("twitter", "filled", None)

        assert icon.source == "x"
        assert is_known_source("twitter")

    @pytest.mark.parametrize("source", ["myspace", "", None])
    def test_unknown_source_uses_fallback(self, source):
        icon = resolve_icon(source, "filled", None)

        assert icon.source == FALLBACK_ENTRY.source
        assert not is_known_source(source) or source == FALLBACK_ENTRY.source


def test_unknown_style_reads_as_filled():
    assert parse_icon_style("sparkly") is IconStyle.FILLED
    assert parse_icon_style(None) is IconStyle.FILLED
    assert parse_icon_style("square") is IconStyle.SQUARE


def test_input_model_matches_positional_call():
    inp = ResolveIconInput(icon_source="email", icon_style="square", primary_color="#000000")

    assert resolve_icon_input(inp) == resolve_icon("email", "square", None, primary_color="#000000")
