"""
Single-pass adapters: iterators, generators and unbounded streams.

An iterator slot has exactly one position, shared by every cursor that
reaches it; there is nothing to copy or re-walk. Its end is only discovered
by pulling one item ahead, and only when somebody asks.
"""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any, Optional

from lazyconcat._capability import Capability, ReferenceKind
from lazyconcat._constants import (
    UNBOUNDED_ITERATOR_TYPE_NAMES,
    UNHINTED_UNBOUNDED_TYPE_NAMES,
)
from lazyconcat.slots.base import Slot, WalkAdapter, WalkPosition


class IteratorAdapter(WalkAdapter):
    """Iterator or generator slot. Single pass."""

    name = "iterator"
    capability = Capability.INPUT
    reference_kind = ReferenceKind.PRODUCED

    def __init__(self, slot: Slot):
        super().__init__(slot)
        self._iterator: Iterator = iter(self.source)
        self._position: Optional[WalkPosition] = None

    @classmethod
    def accepts(cls, source: Any) -> bool:
        return isinstance(source, Iterator)

    def begin(self) -> WalkPosition:
        if self._position is None:
            self._position = WalkPosition(0, iterator=self._iterator)
        return self._position

    def copy(self, pos: WalkPosition) -> WalkPosition:
        raise NotImplementedError(f"'{self.name}' slots are single-pass")


class UnboundedAdapter(IteratorAdapter):
    """
    Iterator known never to end: itertools.count, itertools.repeat
    without times, or any source wrapped in Slot(unbounded=True).

    at_end() is statically False: comparing against the end marker never
    pulls an item.
    """

    name = "unbounded"
    unbounded = True

    @classmethod
    def accepts(cls, source: Any) -> bool:
        kind = type(source)
        name = f"{kind.__module__}.{kind.__qualname__}"
        if name in UNHINTED_UNBOUNDED_TYPE_NAMES:
            return operator.length_hint(source, -1) == -1
        return name in UNBOUNDED_ITERATOR_TYPE_NAMES

    def at_end(self, pos: WalkPosition) -> bool:
        return False
