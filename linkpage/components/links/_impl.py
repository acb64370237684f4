"""
LinkService and LinkRenderer.

Functional Core - pure business logic.

LinkService handles owner-scoped link creation, updates, toggling and
validation. render_link combines a link, its icon and the page theme into
a clickable unit.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any
from urllib.parse import urlparse
from uuid import UUID, uuid4

from linkpage.components.icons import IconDescriptor, is_known_source
from linkpage.components.ordering import CollectionOrderer
from linkpage.components.theme import ThemeParams
from linkpage.domain.entities import CUSTOM_ICON_SOURCE, DEFAULT_ICON_SOURCE, IconStyle, Link
from linkpage.rules.models import LinksRules

from .models import LinkConfig, LinkUnit, LinkValidationError
from .ports import LinkRepoPort

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = LinkConfig()

_SCHEMELESS_PREFIXES = ("mailto:", "tel:")


def link_config_from_rules(rules: LinksRules | None) -> LinkConfig:
    if rules is None:
        return DEFAULT_CONFIG
    return LinkConfig(
        title_max=rules.title_max,
        description_max=rules.description_max,
        url_max=rules.url_max,
        allowed_protocols=frozenset(p.lower() for p in rules.allowed_protocols),
        default_scheme=rules.default_scheme,
    )


# --- URL Handling ---


def normalize_link_url(url: str, config: LinkConfig = DEFAULT_CONFIG) -> str:
    """Strip whitespace and add the default scheme to bare hosts ("example.com")."""
    url = url.strip()
    if not url:
        return url
    if "://" in url or url.lower().startswith(_SCHEMELESS_PREFIXES):
        return url
    return f"{config.default_scheme}://{url}"


# --- Validation Functions ---


def validate_link_data(
    title: str | None = None,
    url: str | None = None,
    description: str | None = None,
    icon: str | None = None,
    icon_style: str | None = None,
    config: LinkConfig = DEFAULT_CONFIG,
) -> list[LinkValidationError]:
    """Validate link data. None means "not supplied"; url is expected normalized."""
    errors: list[LinkValidationError] = []

    if title is not None:
        if not title.strip():
            errors.append(
                LinkValidationError(
                    code="title_required",
                    message="Title is required",
                    field="title",
                )
            )
        elif len(title.strip()) > config.title_max:
            errors.append(
                LinkValidationError(
                    code="title_too_long",
                    message=f"Title must be {config.title_max} characters or less",
                    field="title",
                )
            )

    if url is not None:
        parsed = urlparse(url)
        if not url:
            errors.append(
                LinkValidationError(
                    code="url_required",
                    message="URL is required",
                    field="url",
                )
            )
        elif len(url) > config.url_max:
            errors.append(
                LinkValidationError(
                    code="url_too_long",
                    message=f"URL must be {config.url_max} characters or less",
                    field="url",
                )
            )
        elif parsed.scheme.lower() not in config.allowed_protocols:
            allowed = ", ".join(sorted(config.allowed_protocols))
            errors.append(
                LinkValidationError(
                    code="url_invalid_scheme",
                    message=f"URL scheme must be one of: {allowed}",
                    field="url",
                )
            )
        elif parsed.scheme.lower() in ("http", "https") and not parsed.netloc:
            errors.append(
                LinkValidationError(
                    code="url_invalid",
                    message="URL must include a host",
                    field="url",
                )
            )

    if description is not None and len(description) > config.description_max:
        errors.append(
            LinkValidationError(
                code="description_too_long",
                message=f"Description must be {config.description_max} characters or less",
                field="description",
            )
        )

    if icon is not None and not is_known_source(icon):
        errors.append(
            LinkValidationError(
                code="icon_unknown",
                message=f"Unknown icon source '{icon}'",
                field="icon",
            )
        )

    if icon_style is not None and icon_style not in {s.value for s in IconStyle}:
        errors.append(
            LinkValidationError(
                code="icon_style_invalid",
                message=f"Icon style must be one of: {', '.join(s.value for s in IconStyle)}",
                field="icon_style",
            )
        )

    return errors


def _validate_custom_icon(icon: str, custom_icon_url: str | None) -> list[LinkValidationError]:
    if icon == CUSTOM_ICON_SOURCE and not (custom_icon_url and custom_icon_url.strip()):
        return [
            LinkValidationError(
                code="custom_icon_missing",
                message="Upload an icon image to use a custom icon",
                field="custom_icon_url",
            )
        ]
    return []


def _clean_optional(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


# --- Rendering ---


def render_link(link: Link, icon: IconDescriptor, theme: ThemeParams) -> LinkUnit:
    """Combine a link, its resolved icon and the page theme."""
    return LinkUnit(
        link_id=link.id,
        title=link.title,
        description=link.description or None,
        url=link.url,
        icon=icon,
        background_color=theme.link_background,
        border_color=theme.link_border,
        text_color=theme.text_color,
        muted_text_color=theme.muted_text_color,
        font_family=theme.font_family,
        font_size=theme.font_size,
    )


# --- Link Service ---


class LinkService:
    """
    Link service.

    Manages an owner's outbound links; another owner's link reads as not found.
    """

    def __init__(self, repo: LinkRepoPort, config: LinkConfig = DEFAULT_CONFIG) -> None:
        """Initialize service."""
        self._repo = repo
        self._config = config

    def list_for_owner(self, owner_id: UUID) -> list[Link]:
        """All of an owner's links, active or not, in position order."""
        return list(CollectionOrderer(self._repo.list_for_owner(owner_id)))

    def get_for_owner(self, owner_id: UUID, link_id: UUID) -> Link | None:
        """Get link by ID if it belongs to the owner."""
        link = self._repo.get_by_id(link_id)
        if link is None or link.user_id != owner_id:
            return None
        return link

    def create(
        self,
        owner_id: UUID,
        title: str,
        url: str,
        icon: str = DEFAULT_ICON_SOURCE,
        icon_style: str = IconStyle.FILLED.value,
        custom_icon_url: str | None = None,
        description: str | None = None,
    ) -> tuple[Link | None, list[LinkValidationError]]:
        """
        Create a new link after the owner's existing links.

        Returns:
            Tuple of (link, errors). Link is None if validation fails.
        """
        icon = (icon or DEFAULT_ICON_SOURCE).strip()
        url = normalize_link_url(url, self._config)

        errors = validate_link_data(
            title=title,
            url=url,
            description=description,
            icon=icon,
            icon_style=icon_style,
            config=self._config,
        )
        errors.extend(_validate_custom_icon(icon, custom_icon_url))
        if errors:
            return None, errors

        link = Link(
            id=uuid4(),
            user_id=owner_id,
            title=title.strip(),
            url=url,
            icon=icon,
            icon_style=IconStyle(icon_style),
            custom_icon_url=_clean_optional(custom_icon_url),
            description=_clean_optional(description),
            is_active=True,
            clicks=0,
        )
        placed = CollectionOrderer(self._repo.list_for_owner(owner_id)).append(link).items[-1]

        saved = self._repo.save(placed)
        logger.info("Created link %s at position %d", saved.id, saved.position)
        return saved, []

    def update(
        self,
        owner_id: UUID,
        link_id: UUID,
        updates: dict[str, Any],
    ) -> tuple[Link | None, list[LinkValidationError]]:
        """
        Update an existing link.

        Returns:
            Tuple of (link, errors). Link is None if not found or validation fails.
        """
        link = self.get_for_owner(owner_id, link_id)
        if link is None:
            return None, [_not_found(link_id)]

        if "url" in updates and updates["url"] is not None:
            updates = {**updates, "url": normalize_link_url(str(updates["url"]), self._config)}

        errors = validate_link_data(
            title=updates.get("title"),
            url=updates.get("url"),
            description=updates.get("description"),
            icon=updates.get("icon"),
            icon_style=updates.get("icon_style"),
            config=self._config,
        )
        final_icon = updates.get("icon") or link.icon
        final_custom = (
            updates["custom_icon_url"] if "custom_icon_url" in updates else link.custom_icon_url
        )
        errors.extend(_validate_custom_icon(final_icon, final_custom))
        if errors:
            return None, errors

        changes: dict[str, Any] = {"updated_at": datetime.now(UTC)}
        if updates.get("title") is not None:
            changes["title"] = str(updates["title"]).strip()
        if updates.get("url") is not None:
            changes["url"] = updates["url"]
        if updates.get("icon") is not None:
            changes["icon"] = str(updates["icon"]).strip()
        if updates.get("icon_style") is not None:
            changes["icon_style"] = IconStyle(updates["icon_style"])
        if "custom_icon_url" in updates:
            changes["custom_icon_url"] = _clean_optional(updates["custom_icon_url"])
        if "description" in updates:
            changes["description"] = _clean_optional(updates["description"])

        saved = self._repo.save(link.model_copy(update=changes))
        return saved, []

    def set_active(
        self,
        owner_id: UUID,
        link_id: UUID,
        is_active: bool | None = None,
    ) -> tuple[Link | None, list[LinkValidationError]]:
        """Set the active flag, or flip it when is_active is None."""
        link = self.get_for_owner(owner_id, link_id)
        if link is None:
            return None, [_not_found(link_id)]

        new_state = (not link.is_active) if is_active is None else is_active
        saved = self._repo.save(
            link.model_copy(update={"is_active": new_state, "updated_at": datetime.now(UTC)})
        )
        return saved, []

    def delete(self, owner_id: UUID, link_id: UUID) -> tuple[bool, list[LinkValidationError]]:
        """
        Delete a link.

        Returns:
            Tuple of (success, errors).
        """
        link = self.get_for_owner(owner_id, link_id)
        if link is None:
            return False, [_not_found(link_id)]

        self._repo.delete(link_id)
        return True, []


def _not_found(link_id: UUID) -> LinkValidationError:
    return LinkValidationError(
        code="link_not_found",
        message=f"Link with ID {link_id} not found",
    )
