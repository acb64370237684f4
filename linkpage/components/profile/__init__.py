"""
Profile component - Public profile identity and appearance settings.
"""

from ._impl import (
    ProfileService,
    derive_username,
    normalize_username,
    profile_config_from_rules,
    validate_profile_updates,
    validate_username,
)
from .component import run_get_or_create, run_update
from .models import (
    GetOrCreateProfileInput,
    ProfileConfig,
    ProfileOperationOutput,
    ProfileValidationError,
    UpdateProfileInput,
)
from .ports import ProfileRepoPort

__all__ = [
    # Entry points
    "run_get_or_create",
    "run_update",
    # Core
    "ProfileService",
    "derive_username",
    "normalize_username",
    "profile_config_from_rules",
    "validate_profile_updates",
    "validate_username",
    # Models
    "GetOrCreateProfileInput",
    "UpdateProfileInput",
    "ProfileConfig",
    "ProfileOperationOutput",
    "ProfileValidationError",
    # Ports
    "ProfileRepoPort",
]
