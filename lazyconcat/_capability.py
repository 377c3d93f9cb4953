"""
Traversal capability lattice and per-slot classification enums.

A concatenation is only as capable as its weakest slot:

    INPUT < FORWARD < BIDIRECTIONAL < RANDOM_ACCESS
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from lazyconcat.slots.base import SlotAdapter


class Capability(IntEnum):
    """Traversal strength of a slot or of a whole view."""

    INPUT = 0
    """Single pass. Positions cannot be saved and re-traversed."""

    FORWARD = 1
    """Multi-pass, advance only."""

    BIDIRECTIONAL = 2
    """Multi-pass, advance and retreat."""

    RANDOM_ACCESS = 3
    """Constant-time offsets and distances."""


class ReferenceKind(Enum):
    """What dereferencing a slot hands back."""

    BORROWED = "borrowed"
    """The object stored in the source (list items, dict keys)."""

    PRODUCED = "produced"
    """A freshly computed object (range items, generator output, arrow scalars)."""


class Ownership(Enum):
    """Who is responsible for a slot's source."""

    OWNED = "owned"
    """The view consumes the source and closes it on view.close()."""

    BORROWED = "borrowed"
    """The caller keeps the source; the view only references it."""


def joint_capability(adapters: Sequence[SlotAdapter]) -> Capability:
    """
    Weakest capability across slots, downgraded for missing sizes and ends.

    RANDOM_ACCESS needs every slot sized (cross-slot offsets are prefix sums).
    BIDIRECTIONAL needs every slot to expose an end position: stepping back
    from slot i lands on the end of slot i-1, and reverse traversal starts
    from the end of the last slot.
    """
    capability = min(adapter.capability for adapter in adapters)

    if capability >= Capability.RANDOM_ACCESS and not all(
        adapter.sized for adapter in adapters
    ):
        capability = Capability.BIDIRECTIONAL

    if capability >= Capability.BIDIRECTIONAL and not all(
        adapter.common for adapter in adapters
    ):
        capability = Capability.FORWARD

    return capability


def weakest_slots(adapters: Sequence[SlotAdapter], required: Capability) -> list[int]:
    """Indices of slots whose own capability is below `required`."""
    return [i for i, adapter in enumerate(adapters) if adapter.capability < required]
