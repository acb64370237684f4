"""
Compose component - Public profile page assembly.
"""

from ._impl import build_header, build_page, strip_username
from .component import run_compose, run_link_click
from .models import (
    ComposeOutput,
    ComposePageInput,
    LinkClickInput,
    LinkClickOutput,
    LinkNotFound,
    PageViewModel,
    ProfileHeader,
    ProfileNotFound,
)

__all__ = [
    # Entry points
    "run_compose",
    "run_link_click",
    # Core
    "build_page",
    "build_header",
    "strip_username",
    # Models
    "ComposePageInput",
    "ComposeOutput",
    "LinkClickInput",
    "LinkClickOutput",
    "PageViewModel",
    "ProfileHeader",
    # Not found
    "ProfileNotFound",
    "LinkNotFound",
]
