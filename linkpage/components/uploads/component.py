"""
Uploads component - Avatar, icon and content image uploads.

Shell Layer - handles I/O and error conversion.

A storage failure never touches saved entities: the caller only stores the
returned URL after a successful upload.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from ._impl import DEFAULT_CONFIG, destination_path, validate_upload
from .models import UploadConfig, UploadFailure, UploadInput, UploadOutput, UploadValidationError
from .ports import StoragePort

logger = logging.getLogger(__name__)


def run_upload(
    input_data: UploadInput,
    storage: StoragePort,
    config: UploadConfig = DEFAULT_CONFIG,
    now: datetime | None = None,
) -> UploadOutput:
    """Validate and store an uploaded image."""
    errors = validate_upload(input_data.filename, input_data.data, input_data.mime_type, config)
    if errors:
        return UploadOutput(result=None, errors=tuple(errors), success=False)

    path = destination_path(
        input_data.kind,
        input_data.owner_id,
        input_data.filename,
        now or datetime.now(UTC),
    )

    try:
        result = storage.upload(input_data.data, path, upsert=True)
    except UploadFailure as e:
        logger.warning("Upload to %s failed: %s", path, e)
        return UploadOutput(
            result=None,
            errors=(
                UploadValidationError(
                    code="upload_failed",
                    message="Upload failed, please try again",
                    retryable=True,
                ),
            ),
            success=False,
        )

    logger.info("Stored %s upload for owner %s at %s", input_data.kind, input_data.owner_id, path)
    return UploadOutput(result=result)
