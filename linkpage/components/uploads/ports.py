"""
Uploads component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from .models import UploadResult


class StoragePort(Protocol):
    """Binary storage collaborator."""

    def upload(self, data: bytes, destination_path: str, upsert: bool = True) -> UploadResult:
        """
        Store bytes at destination_path.

        Raises:
            UploadFailure: the bytes were not stored.
        """
        ...
