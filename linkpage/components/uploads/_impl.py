"""
Upload validation and destination paths.

Functional Core - pure business logic.

Destinations:
- avatar:  avatars/<owner>/<name>         (re-uploads replace the old avatar)
- icon:    icons/<ms timestamp>_<name>
- content: content/<owner>/<ms timestamp>-<name>
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import PurePosixPath
from uuid import UUID

from linkpage.rules.models import UploadsRules

from .models import UploadConfig, UploadKind, UploadValidationError

DEFAULT_CONFIG = UploadConfig()

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def upload_config_from_rules(rules: UploadsRules | None) -> UploadConfig:
    if rules is None:
        return DEFAULT_CONFIG
    return UploadConfig(
        max_upload_bytes=rules.max_upload_bytes,
        allowlist_mime_types=frozenset(m.lower() for m in rules.allowlist_mime_types),
        allowlist_extensions=frozenset(e.lower() for e in rules.allowlist_extensions),
        public_prefix=rules.public_prefix,
    )


def sanitize_filename(filename: str) -> str:
    """Keep the base name only, with spaces and odd characters replaced by '_'."""
    name = PurePosixPath(filename.replace("\\", "/")).name
    name = _UNSAFE_CHARS.sub("_", name).strip("._")
    return name or "upload"


def destination_path(kind: UploadKind, owner_id: UUID, filename: str, now: datetime) -> str:
    name = sanitize_filename(filename)
    stamp = int(now.timestamp() * 1000)
    if kind == "avatar":
        return f"avatars/{owner_id}/{name}"
    if kind == "icon":
        return f"icons/{stamp}_{name}"
    return f"content/{owner_id}/{stamp}-{name}"


def validate_upload(
    filename: str,
    data: bytes,
    mime_type: str | None,
    config: UploadConfig = DEFAULT_CONFIG,
) -> list[UploadValidationError]:
    errors: list[UploadValidationError] = []

    if not data:
        errors.append(
            UploadValidationError(code="file_empty", message="File is empty", field="file")
        )
    elif len(data) > config.max_upload_bytes:
        limit_mb = config.max_upload_bytes / (1024 * 1024)
        errors.append(
            UploadValidationError(
                code="file_too_large",
                message=f"File must be {limit_mb:g} MB or less",
                field="file",
            )
        )

    extension = PurePosixPath(sanitize_filename(filename)).suffix.lower()
    if extension not in config.allowlist_extensions:
        errors.append(
            UploadValidationError(
                code="extension_not_allowed",
                message=f"File type '{extension or '(none)'}' is not allowed",
                field="filename",
            )
        )

    if mime_type is not None and mime_type.lower() not in config.allowlist_mime_types:
        errors.append(
            UploadValidationError(
                code="mime_not_allowed",
                message=f"Content type '{mime_type}' is not allowed",
                field="mime_type",
            )
        )

    return errors
