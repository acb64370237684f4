"""
Ordering component - Dense, owner-scoped ordering for links and content blocks.
"""

from ._impl import ActiveView, CollectionOrderer, Positioned, is_contiguous
from .component import run_move
from .models import (
    InvalidIndex,
    MoveInput,
    MoveOutput,
    OrderingError,
    OrderingValidationError,
    UnknownItem,
)
from .ports import OrderedRepoPort

__all__ = [
    # Entry points
    "run_move",
    # Core
    "ActiveView",
    "CollectionOrderer",
    "Positioned",
    "is_contiguous",
    # Models
    "MoveInput",
    "MoveOutput",
    "OrderingValidationError",
    # Errors
    "OrderingError",
    "InvalidIndex",
    "UnknownItem",
    # Ports
    "OrderedRepoPort",
]
