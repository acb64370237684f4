"""
Ordering component - Reorder entry point.

Shell Layer - handles I/O and error conversion.

The move is computed on an in-memory copy of the owner's collection and the
changed positions are written through one save_positions call. Positions
persisted by older partial writes are not repaired here beyond what the
reindex of the next move rewrites.
"""

from __future__ import annotations

import logging

from ._impl import CollectionOrderer
from .models import InvalidIndex, MoveInput, MoveOutput, OrderingValidationError, UnknownItem
from .ports import OrderedRepoPort

logger = logging.getLogger(__name__)


def run_move(input_data: MoveInput, repo: OrderedRepoPort) -> MoveOutput:
    """Move one item and persist the resulting dense order."""
    before: CollectionOrderer = CollectionOrderer(repo.list_for_owner(input_data.owner_id))

    try:
        after = before.move(input_data.item_id, input_data.from_index, input_data.to_index)
    except InvalidIndex as e:
        return MoveOutput(
            errors=(
                OrderingValidationError(
                    code="invalid_index",
                    message=str(e),
                    field="to_index" if e.index == input_data.to_index else "from_index",
                ),
            ),
            success=False,
        )
    except UnknownItem as e:
        return MoveOutput(
            errors=(OrderingValidationError(code="item_not_found", message=str(e)),),
            success=False,
        )

    changed = after.changed_positions(before)
    if changed:
        repo.save_positions(input_data.owner_id, changed)
        logger.info(
            "Reordered %d items for owner %s", len(changed), input_data.owner_id
        )

    return MoveOutput(order=after.ids(), errors=(), success=True, writes=len(changed))
