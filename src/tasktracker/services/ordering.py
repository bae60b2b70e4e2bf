"""Ordering of sibling records.

Columns within a project and tasks within a column keep their ``position``
values as a dense ``0..n-1`` sequence. The ``plan_*`` functions compute the
records that have to be rewritten for an insert, a move inside one parent,
a move to another parent, a removal or a bulk append; they never touch
storage. ``SiblingOrder`` persists those plans through a repository, one
batch per operation.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Generic, Protocol, Self, TypeVar
from uuid import UUID

from ..errors import error_context
from ..repositories import PositionedRepositoryProtocol

logger = logging.getLogger(__name__)


class Positioned(Protocol):
    """A record ordered among the siblings sharing its parent."""

    id: UUID
    position: int

    @property
    def parent_id(self) -> UUID: ...

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False) -> Self: ...


P = TypeVar("P", bound=Positioned)


def _at(item: P, position: int) -> P:
    return item.model_copy(update={"position": position})


def plan_insert(item: P, siblings: Sequence[P]) -> tuple[list[P], P]:
    """Plan inserting ``item`` at its requested position.

    Args:
        item: The new record, carrying the requested position.
        siblings: Current records of the target parent.

    Returns:
        The siblings that have to shift one slot forward, and the record
        as it should be stored. A position past the end becomes an append.
    """
    if item.position >= len(siblings):
        return [], _at(item, len(siblings))
    shifted = [_at(s, s.position + 1) for s in siblings if s.position >= item.position]
    return shifted, item


def plan_move(old: P, updated: P, siblings: Sequence[P]) -> list[P]:
    """Plan a move inside one parent.

    Args:
        old: The record as currently stored; its position is authoritative.
        updated: The desired state, with the parent already pinned to ``old``'s.
        siblings: All records of the parent, ``old`` included.

    Returns:
        The batch to write with the moved record last, or an empty list when
        nothing changes once the position is clamped to the last slot.
    """
    last = max(len(siblings) - 1, 0)
    if updated.position > last:
        updated = _at(updated, last)
    if updated == old:
        return []

    lo, hi = old.position, updated.position
    if lo < hi:
        # Moving right: everything in (old, new] slides left
        shifted = [
            _at(s, s.position - 1) for s in siblings if s.id != old.id and lo < s.position <= hi
        ]
    elif lo > hi:
        # Moving left: everything in [new, old) slides right
        shifted = [
            _at(s, s.position + 1) for s in siblings if s.id != old.id and hi <= s.position < lo
        ]
    else:
        shifted = []
    return [*shifted, updated]


def plan_transfer(
    old: P, updated: P, old_siblings: Sequence[P], new_siblings: Sequence[P]
) -> list[P]:
    """Plan moving a record to a different parent.

    The gap left in the old parent is closed, a slot is opened in the new
    one, and the destination position is clamped to ``[0, len(new_siblings)]``
    so the record can also land at the end.

    Returns:
        Old-parent adjustments, then new-parent adjustments, then the moved
        record.
    """
    position = min(max(updated.position, 0), len(new_siblings))
    moved = _at(updated, position)
    closing = [
        _at(s, s.position - 1) for s in old_siblings if s.id != old.id and s.position > old.position
    ]
    opening = [_at(s, s.position + 1) for s in new_siblings if s.position >= position]
    return [*closing, *opening, moved]


def plan_removal(removed: P, siblings: Sequence[P]) -> list[P]:
    """Plan closing the gap a removed record leaves behind."""
    return [
        _at(s, s.position - 1)
        for s in siblings
        if s.id != removed.id and s.position > removed.position
    ]


def plan_append(moving: Sequence[P], siblings: Sequence[P]) -> list[P]:
    """Plan appending ``moving`` after ``siblings``, keeping their relative order."""
    offset = len(siblings)
    ordered = sorted(moving, key=lambda item: item.position)
    return [_at(item, offset + i) for i, item in enumerate(ordered)]


class SiblingOrder(Generic[P]):
    """Applies ordering plans through a repository.

    Every operation writes its adjustments as one ``update`` batch, so it
    is all-or-nothing as long as the repository's batch update is. Reading
    the siblings and writing the batch are separate steps: two concurrent
    reorders of the same parent can still interleave.
    """

    def __init__(self, repository: PositionedRepositoryProtocol[P], kind: str) -> None:
        self.repository = repository
        self.kind = kind

    def insert(self, item: P, siblings: Sequence[P]) -> P:
        """Store a new record, shifting the siblings at or after its position."""
        shifted, item = plan_insert(item, siblings)
        with error_context(f"insert {self.kind} at position {item.position}"):
            if shifted:
                self.repository.update(*shifted)
            stored = self.repository.store(item)
        logger.debug(
            "Inserted %s %s at %d (%d shifted)", self.kind, stored.id, stored.position, len(shifted)
        )
        return stored

    def move(self, old: P, updated: P, siblings: Sequence[P]) -> P:
        """Move a record within its parent; returns the record as stored."""
        batch = plan_move(old, updated, siblings)
        if not batch:
            logger.debug("%s %s unchanged, nothing to write", self.kind.capitalize(), old.id)
            return old
        with error_context(f"move {self.kind} {old.id}"):
            self.repository.update(*batch)
        moved = batch[-1]
        logger.debug(
            "Moved %s %s: %d -> %d (%d shifted)",
            self.kind,
            moved.id,
            old.position,
            moved.position,
            len(batch) - 1,
        )
        return moved

    def transfer(
        self, old: P, updated: P, old_siblings: Sequence[P], new_siblings: Sequence[P]
    ) -> P:
        """Move a record to another parent; returns the record as stored."""
        batch = plan_transfer(old, updated, old_siblings, new_siblings)
        with error_context(f"transfer {self.kind} {old.id}"):
            self.repository.update(*batch)
        moved = batch[-1]
        logger.debug(
            "Transferred %s %s: %s[%d] -> %s[%d]",
            self.kind,
            moved.id,
            old.parent_id,
            old.position,
            moved.parent_id,
            moved.position,
        )
        return moved

    def close_gap(self, removed: P, siblings: Sequence[P]) -> None:
        """Shift the siblings after a removed record one slot back."""
        batch = plan_removal(removed, siblings)
        if batch:
            with error_context(f"close gap after {self.kind} {removed.id}"):
                self.repository.update(*batch)
