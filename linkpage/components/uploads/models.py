"""
Uploads component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal
from uuid import UUID

UploadKind = Literal["avatar", "icon", "content"]


class UploadFailure(Exception):
    """The storage collaborator did not accept the file. Safe to retry."""

    retryable = True


@dataclass(frozen=True)
class UploadValidationError:
    """Upload error as surfaced to the shell."""

    code: str
    message: str
    field: str | None = None
    retryable: bool = False


@dataclass(frozen=True)
class UploadConfig:
    max_upload_bytes: int = 5 * 1024 * 1024
    allowlist_mime_types: frozenset[str] = frozenset(
        {"image/png", "image/jpeg", "image/gif", "image/webp"}
    )
    allowlist_extensions: frozenset[str] = frozenset(
        {".png", ".jpg", ".jpeg", ".gif", ".webp"}
    )
    public_prefix: str = "/assets"


@dataclass(frozen=True)
class UploadResult:
    """What the storage collaborator hands back for a stored file."""

    public_url: str
    path: str


@dataclass(frozen=True)
class UploadInput:
    kind: UploadKind
    owner_id: UUID
    filename: str
    data: bytes
    mime_type: str | None = None


@dataclass(frozen=True)
class UploadOutput:
    result: UploadResult | None
    errors: tuple[UploadValidationError, ...] = field(default_factory=tuple)
    success: bool = True

    @property
    def public_url(self) -> str | None:
        return self.result.public_url if self.result else None
