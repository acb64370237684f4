"""
Uploads component - Image uploads for avatars, custom icons and content blocks.
"""

from ._impl import (
    destination_path,
    sanitize_filename,
    upload_config_from_rules,
    validate_upload,
)
from .component import run_upload
from .models import (
    UploadConfig,
    UploadFailure,
    UploadInput,
    UploadKind,
    UploadOutput,
    UploadResult,
    UploadValidationError,
)
from .ports import StoragePort

__all__ = [
    # Entry points
    "run_upload",
    # Core
    "destination_path",
    "sanitize_filename",
    "upload_config_from_rules",
    "validate_upload",
    # Models
    "UploadConfig",
    "UploadInput",
    "UploadKind",
    "UploadOutput",
    "UploadResult",
    "UploadValidationError",
    # Errors
    "UploadFailure",
    # Ports
    "StoragePort",
]
