"""
Unit tests for the link service and link rendering.
"""

from uuid import uuid4

import pytest

from linkpage.components.icons import GlyphIcon, ImageIcon
from linkpage.components.links import (
    CreateLinkInput,
    DeleteLinkInput,
    GetLinkInput,
    LinkConfig,
    LinkService,
    ListLinksInput,
    ToggleLinkInput,
    UpdateLinkInput,
    link_config_from_rules,
    normalize_link_url,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_render,
    run_toggle,
    run_update,
    validate_link_data,
)
from linkpage.components.theme import resolve_theme
from linkpage.domain.entities import IconStyle


@pytest.fixture
def service(link_repo, rules):
    return LinkService(link_repo, link_config_from_rules(rules.links))


class TestNormalizeUrl:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("example.com", "https://example.com"),
            ("  example.com/shop ", "https://example.com/shop"),
            ("http://example.com", "http://example.com"),
            ("mailto:me@example.com", "mailto:me@example.com"),
            ("tel:+15551234", "tel:+15551234"),
            ("", ""),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_link_url(raw) == expected

    def test_default_scheme_is_configurable(self):
        config = LinkConfig(default_scheme="http")

        assert normalize_link_url("example.com", config) == "http://example.com"


class TestValidateLinkData:
    def test_valid(self):
        assert validate_link_data(title="Shop", url="https://example.com") == []

    def test_blank_title(self):
        errors = validate_link_data(title="   ")

        assert errors[0].code == "title_required"
        assert errors[0].field == "title"

    def test_title_too_long(self):
        errors = validate_link_data(title="x" * 201)

        assert errors[0].code == "title_too_long"

    def test_disallowed_scheme(self):
        errors = validate_link_data(url="ftp://files.example.com")

        assert errors[0].code == "url_invalid_scheme"

    def test_http_without_host(self):
        errors = validate_link_data(url="https://")

        assert errors[0].code == "url_invalid"

    def test_url_required(self):
        assert validate_link_data(url="")[0].code == "url_required"

    def test_url_too_long(self):
        errors = validate_link_data(url="https://example.com/" + "a" * 2048)

        assert errors[0].code == "url_too_long"

    def test_unknown_icon_and_style(self):
        errors = validate_link_data(icon="myspace", icon_style="sparkly")

        assert {e.code for e in errors} == {"icon_unknown", "icon_style_invalid"}

    def test_description_too_long(self):
        errors = validate_link_data(description="d" * 301)

        assert errors[0].code == "description_too_long"


class TestLinkService:
    def test_create_normalizes_and_appends(self, service, owner):
        first, errors = service.create(owner.id, " Shop ", "shop.example.com")
        second, _ = service.create(owner.id, "Blog", "https://blog.example.com")

        assert errors == []
        assert first.title == "Shop"
        assert first.url == "https://shop.example.com"
        assert first.clicks == 0
        assert first.is_active is True
        assert (first.position, second.position) == (0, 1)

    def test_create_invalid_is_not_saved(self, service, owner, link_repo):
        link, errors = service.create(owner.id, "", "https://example.com")

        assert link is None
        assert errors[0].code == "title_required"
        assert link_repo.list_for_owner(owner.id) == []

    def test_custom_icon_needs_uploaded_image(self, service, owner):
        link, errors = service.create(owner.id, "Me", "https://example.com", icon="custom")

        assert link is None
        assert errors[0].code == "custom_icon_missing"

    def test_custom_icon_with_image(self, service, owner):
        link, errors = service.create(
            owner.id,
            "Me",
            "https://example.com",
            icon="custom",
            icon_style="rounded",
            custom_icon_url="/assets/icons/1_me.png",
        )

        assert errors == []
        assert link.icon == "custom"
        assert link.icon_style is IconStyle.ROUNDED

    def test_blank_description_stored_as_none(self, service, owner):
        link, _ = service.create(owner.id, "Shop", "https://example.com", description="  ")

        assert link.description is None

    def test_append_after_delete_follows_highest_position(self, service, owner):
        a, _ = service.create(owner.id, "A", "https://a.example.com")
        b, _ = service.create(owner.id, "B", "https://b.example.com")
        service.delete(owner.id, b.id)

        c, _ = service.create(owner.id, "C", "https://c.example.com")

        assert a.position == 0
        assert c.position == 1
        positions = [link.position for link in service.list_for_owner(owner.id)]
        assert len(positions) == len(set(positions))

    def test_update_normalizes_url(self, service, owner):
        link, _ = service.create(owner.id, "Shop", "https://example.com")

        updated, errors = service.update(owner.id, link.id, {"url": "new.example.com"})

        assert errors == []
        assert updated.url == "https://new.example.com"
        assert updated.title == "Shop"

    def test_switching_to_custom_keeps_existing_image_check(self, service, owner):
        link, _ = service.create(owner.id, "Shop", "https://example.com")

        updated, errors = service.update(owner.id, link.id, {"icon": "custom"})

        assert updated is None
        assert errors[0].code == "custom_icon_missing"

    def test_other_owner_reads_not_found(self, service, owner, other_owner):
        link, _ = service.create(owner.id, "Shop", "https://example.com")

        assert service.get_for_owner(other_owner.id, link.id) is None
        _, errors = service.set_active(other_owner.id, link.id)
        assert errors[0].code == "link_not_found"

    def test_set_active_flips_and_sets(self, service, owner):
        link, _ = service.create(owner.id, "Shop", "https://example.com")

        off, _ = service.set_active(owner.id, link.id)
        still_off, _ = service.set_active(owner.id, link.id, False)

        assert off.is_active is False
        assert still_off.is_active is False


class TestShell:
    def test_create_get_list(self, service, owner):
        created = run_create(
            CreateLinkInput(owner_id=owner.id, title="Shop", url="example.com"), service
        )
        fetched = run_get(GetLinkInput(owner_id=owner.id, link_id=created.link.id), service)
        listing = run_list(ListLinksInput(owner_id=owner.id), service)

        assert created.success
        assert fetched.link == created.link
        assert listing.total == 1

    def test_get_missing(self, service, owner):
        result = run_get(GetLinkInput(owner_id=owner.id, link_id=uuid4()), service)

        assert not result.success
        assert result.errors[0].code == "link_not_found"

    def test_update_skips_unset_fields(self, service, owner):
        created = run_create(
            CreateLinkInput(
                owner_id=owner.id, title="Shop", url="https://example.com", description="Deals"
            ),
            service,
        )

        result = run_update(
            UpdateLinkInput(owner_id=owner.id, link_id=created.link.id, title="Store"), service
        )

        assert result.success
        assert result.link.title == "Store"
        assert result.link.description == "Deals"

    def test_toggle_and_delete(self, service, owner):
        created = run_create(
            CreateLinkInput(owner_id=owner.id, title="Shop", url="https://example.com"), service
        )

        toggled = run_toggle(ToggleLinkInput(owner_id=owner.id, link_id=created.link.id), service)
        deleted = run_delete(DeleteLinkInput(owner_id=owner.id, link_id=created.link.id), service)

        assert toggled.link.is_active is False
        assert deleted.success
        assert run_list(ListLinksInput(owner_id=owner.id), service).total == 0


class TestRender:
    def test_glyph_icon_tinted_with_primary(self, service, owner):
        link, _ = service.create(owner.id, "Code", "https://github.com/alice", icon="github")
        theme = resolve_theme("developer", "#10B981", None, None, "large", None, False)

        unit = run_render(link, theme)

        assert isinstance(unit.icon, GlyphIcon)
        assert unit.icon.color == "#10B981"
        assert unit.background_color == "#10B98115"
        assert unit.border_color == "#10B98130"
        assert unit.text_color == "#FFFFFF"
        assert unit.font_size == "1.125rem"

    def test_custom_icon_uses_title_as_alt(self, service, owner):
        link, _ = service.create(
            owner.id,
            "Me",
            "https://example.com",
            icon="custom",
            custom_icon_url="/assets/icons/me.png",
        )
        theme = resolve_theme("designer", "#6366F1", None, None, None, None, False)

        unit = run_render(link, theme)

        assert isinstance(unit.icon, ImageIcon)
        assert unit.icon.alt == "Me"
