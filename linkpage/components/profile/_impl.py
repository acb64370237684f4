"""
ProfileService - Owner profile creation and editing.

Functional Core - pure business logic.

Key behaviors:
- First dashboard visit creates a profile with defaults
- Default username comes from the e-mail local part; taken names get a suffix
- Every editable field is validated before anything is saved
"""

from __future__ import annotations

import logging
import re
import time
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from linkpage.components.theme import (
    FONT_SIZES,
    PAGE_WIDTHS,
    is_known_font,
    is_known_template,
    normalize_hex_color,
)
from linkpage.domain.entities import Owner, Profile
from linkpage.rules.models import ProfileRules

from .models import ProfileConfig, ProfileValidationError
from .ports import ProfileRepoPort

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = ProfileConfig()

_USERNAME_STRIP = re.compile(r"[^a-z0-9_.-]")


def profile_config_from_rules(rules: ProfileRules | None) -> ProfileConfig:
    if rules is None:
        return DEFAULT_CONFIG
    d = rules.defaults
    return ProfileConfig(
        username_min=rules.username.min,
        username_max=rules.username.max,
        username_pattern=rules.username.pattern,
        reserved_usernames=frozenset(u.lower() for u in rules.reserved_usernames),
        display_name_max=rules.display_name_max,
        bio_max=rules.bio_max,
        default_bio=d.bio,
        default_template=d.template,
        default_primary_color=d.primary_color,
        default_background_color=d.background_color,
        default_font_family=d.font_family,
        default_font_size=d.font_size,
        default_page_width=d.page_width,
        default_is_rtl=d.is_rtl,
    )


def normalize_username(value: str) -> str:
    """Lower-case and drop a leading "@"."""
    return value.strip().lstrip("@").lower()


def derive_username(owner: Owner, config: ProfileConfig = DEFAULT_CONFIG) -> str:
    """Default username: the e-mail local part, or user_<timestamp>."""
    local = (owner.email or "").split("@")[0]
    candidate = _USERNAME_STRIP.sub("", local.lower())[: config.username_max]
    candidate = candidate.lstrip("_.-")
    if len(candidate) < config.username_min or candidate in config.reserved_usernames:
        return f"user_{int(time.time() * 1000)}"
    return candidate


# --- Validation Functions ---


def validate_username(
    username: str,
    config: ProfileConfig = DEFAULT_CONFIG,
) -> list[ProfileValidationError]:
    errors: list[ProfileValidationError] = []

    if len(username) < config.username_min or len(username) > config.username_max:
        errors.append(
            ProfileValidationError(
                code="username_length",
                message=(
                    f"Username must be {config.username_min}-{config.username_max} characters"
                ),
                field="username",
            )
        )
    elif not re.match(config.username_pattern, username):
        errors.append(
            ProfileValidationError(
                code="username_invalid",
                message="Username may contain lowercase letters, digits, '_', '.' and '-'",
                field="username",
            )
        )
    elif username in config.reserved_usernames:
        errors.append(
            ProfileValidationError(
                code="username_reserved",
                message=f"Username '{username}' is reserved",
                field="username",
            )
        )

    return errors


def validate_profile_updates(
    updates: dict[str, Any],
    config: ProfileConfig = DEFAULT_CONFIG,
) -> list[ProfileValidationError]:
    """Validate supplied fields only. Username uniqueness is checked by the service."""
    errors: list[ProfileValidationError] = []

    if "username" in updates:
        errors.extend(validate_username(updates["username"], config))

    if "display_name" in updates:
        name = updates["display_name"].strip()
        if not name:
            errors.append(
                ProfileValidationError(
                    code="display_name_required",
                    message="Display name is required",
                    field="display_name",
                )
            )
        elif len(name) > config.display_name_max:
            errors.append(
                ProfileValidationError(
                    code="display_name_too_long",
                    message=f"Display name must be {config.display_name_max} characters or less",
                    field="display_name",
                )
            )

    if "bio" in updates and len(updates["bio"]) > config.bio_max:
        errors.append(
            ProfileValidationError(
                code="bio_too_long",
                message=f"Bio must be {config.bio_max} characters or less",
                field="bio",
            )
        )

    if "template" in updates and not is_known_template(updates["template"]):
        errors.append(
            ProfileValidationError(
                code="template_unknown",
                message=f"Unknown template '{updates['template']}'",
                field="template",
            )
        )

    # An empty background clears the override; the primary color is required
    for color_field in ("primary_color", "background_color"):
        if color_field not in updates:
            continue
        value = updates[color_field]
        if (value or color_field == "primary_color") and normalize_hex_color(value) is None:
            errors.append(
                ProfileValidationError(
                    code="color_invalid",
                    message="Colors must be #RGB or #RRGGBB",
                    field=color_field,
                )
            )

    if "font_family" in updates and not is_known_font(updates["font_family"]):
        errors.append(
            ProfileValidationError(
                code="font_unknown",
                message=f"Unknown font '{updates['font_family']}'",
                field="font_family",
            )
        )

    if "font_size" in updates and updates["font_size"] not in FONT_SIZES:
        errors.append(
            ProfileValidationError(
                code="font_size_invalid",
                message=f"Font size must be one of: {', '.join(FONT_SIZES)}",
                field="font_size",
            )
        )

    if "page_width" in updates and updates["page_width"] not in PAGE_WIDTHS:
        errors.append(
            ProfileValidationError(
                code="page_width_invalid",
                message=f"Page width must be one of: {', '.join(PAGE_WIDTHS)}",
                field="page_width",
            )
        )

    return errors


# --- Profile Service ---


class ProfileService:
    """Profile service."""

    def __init__(self, repo: ProfileRepoPort, config: ProfileConfig = DEFAULT_CONFIG) -> None:
        self._repo = repo
        self._config = config

    def get_by_username(self, username: str) -> Profile | None:
        return self._repo.get_by_username(normalize_username(username))

    def get_for_owner(self, owner_id: UUID) -> Profile | None:
        return self._repo.get_by_owner(owner_id)

    def get_or_create(self, owner: Owner) -> tuple[Profile, bool]:
        """
        Return the owner's profile, creating it with defaults on first use.

        Returns:
            Tuple of (profile, created).
        """
        existing = self._repo.get_by_owner(owner.id)
        if existing is not None:
            return existing, False

        c = self._config
        username = self._available_username(derive_username(owner, c))
        display_name = (owner.display_name or "").strip() or (
            (owner.email or "").split("@")[0] or "User"
        )

        profile = Profile(
            id=uuid4(),
            user_id=owner.id,
            username=username,
            display_name=display_name[: c.display_name_max],
            bio=c.default_bio,
            avatar_url=None,
            template=c.default_template,
            primary_color=c.default_primary_color,
            background_color=c.default_background_color,
            font_family=c.default_font_family,
            font_size=c.default_font_size,
            page_width=c.default_page_width,
            is_rtl=c.default_is_rtl,
        )
        saved = self._repo.save(profile)
        logger.info("Created profile %s (@%s) for owner %s", saved.id, saved.username, owner.id)
        return saved, True

    def update(
        self,
        owner_id: UUID,
        updates: dict[str, Any],
    ) -> tuple[Profile | None, list[ProfileValidationError]]:
        """
        Update the owner's profile.

        Returns:
            Tuple of (profile, errors). Profile is None if not found or validation fails.
        """
        profile = self._repo.get_by_owner(owner_id)
        if profile is None:
            return None, [
                ProfileValidationError(
                    code="profile_not_found",
                    message=f"No profile for owner {owner_id}",
                )
            ]

        if "username" in updates:
            updates = {**updates, "username": normalize_username(updates["username"])}

        errors = validate_profile_updates(updates, self._config)

        new_username = updates.get("username")
        if not errors and new_username and new_username != profile.username:
            taken = self._repo.get_by_username(new_username)
            if taken is not None and taken.id != profile.id:
                errors.append(
                    ProfileValidationError(
                        code="username_taken",
                        message=f"Username '{new_username}' is already taken",
                        field="username",
                    )
                )

        if errors:
            return None, errors

        changes: dict[str, Any] = {"updated_at": datetime.now(UTC)}
        for name, value in updates.items():
            if name in ("primary_color", "background_color") and value:
                value = normalize_hex_color(value)
            elif name == "background_color":
                value = None
            elif name in ("display_name", "bio") and isinstance(value, str):
                value = value.strip()
            elif name == "avatar_url":
                value = (value or "").strip() or None
            changes[name] = value

        saved = self._repo.save(profile.model_copy(update=changes))
        return saved, []

    # --- Helpers ---

    def _available_username(self, base: str) -> str:
        if self._repo.get_by_username(base) is None:
            return base
        suffix = 2
        while True:
            tail = str(suffix)
            candidate = f"{base[: self._config.username_max - len(tail)]}{tail}"
            if self._repo.get_by_username(candidate) is None:
                return candidate
            suffix += 1
