"""
Sequence adapter.

Default adapter for list, tuple, range, str, bytes, deque and anything else
registered as collections.abc.Sequence. Random access, sized, common.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from lazyconcat._capability import ReferenceKind
from lazyconcat._constants import PRODUCED_SEQUENCE_TYPES
from lazyconcat.slots.base import IndexedAdapter, Slot, declared_element_type


class SequenceAdapter(IndexedAdapter):
    """
    collections.abc.Sequence slot.

    size() is read live on every call, so appending to a borrowed list
    is visible through the view.
    """

    name = "sequence"

    def __init__(self, slot: Slot):
        super().__init__(slot)
        if isinstance(self.source, PRODUCED_SEQUENCE_TYPES):
            self.reference_kind = ReferenceKind.PRODUCED

    @classmethod
    def accepts(cls, source: Any) -> bool:
        return isinstance(source, Sequence)

    def _infer_element_type(self) -> Any:
        source = self.source
        if isinstance(source, range):
            return int
        if isinstance(source, str):
            return str
        if isinstance(source, (bytes, bytearray)):
            return int
        return declared_element_type(source)

    def size(self) -> int:
        return len(self.source)

    def _get(self, i: int) -> Any:
        return self.source[i]
