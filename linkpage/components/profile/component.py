"""
Profile component - Owner profile entry points.

Shell Layer - handles I/O and error conversion.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from ._impl import ProfileService
from .models import GetOrCreateProfileInput, ProfileOperationOutput, UpdateProfileInput


def run_get_or_create(
    input_data: GetOrCreateProfileInput,
    service: ProfileService,
) -> ProfileOperationOutput:
    """Open the owner's profile, creating the default one on first visit."""
    profile, created = service.get_or_create(input_data.owner)
    return ProfileOperationOutput(profile=profile, created=created)


def run_update(
    input_data: UpdateProfileInput,
    service: ProfileService,
) -> ProfileOperationOutput:
    """Update the supplied profile fields."""
    updates: dict[str, Any] = {
        name: value
        for name, value in asdict(input_data).items()
        if name != "owner_id" and value is not None
    }

    profile, errors = service.update(input_data.owner_id, updates)
    return ProfileOperationOutput(
        profile=profile,
        errors=tuple(errors),
        success=profile is not None,
    )
