"""
Nested view adapter.

A ConcatView passed to concat() is walked with its own cursors, so the
outer view inherits exactly what the inner one can do: a single-pass inner
view makes the outer view single-pass, an indexed one keeps random access.
"""

from __future__ import annotations

from typing import Any

from lazyconcat.slots.base import Slot, SlotAdapter


class NestedViewAdapter(SlotAdapter):
    """
    ConcatView slot. Positions are the inner view's cursors.

    Capability, sizedness, common end and reference kind are read from the
    inner view instead of from the class.
    """

    name = "nested"

    def __init__(self, slot: Slot):
        super().__init__(slot)
        self.capability = self.source.capability
        self.reference_kind = self.source.reference.kind

    @classmethod
    def accepts(cls, source: Any) -> bool:
        from lazyconcat.concat._view import ConcatView

        return isinstance(source, ConcatView)

    @property
    def sized(self) -> bool:
        return hasattr(self.source, "size")

    @property
    def common(self) -> bool:
        return self.source.is_common

    def _infer_element_type(self) -> Any:
        return self.source.element_type

    def begin(self) -> Any:
        return self.source.begin()

    def at_end(self, pos: Any) -> bool:
        return pos == self.source.end()

    def next(self, pos: Any) -> Any:
        pos.advance()
        return pos

    def deref(self, pos: Any) -> Any:
        return pos.value

    def copy(self, pos: Any) -> Any:
        if not hasattr(pos, "copy"):
            raise NotImplementedError(f"'{self.name}' slot over a single-pass view")
        return pos.copy()

    def is_begin(self, pos: Any) -> bool:
        return pos == self.source.begin()

    def prev(self, pos: Any) -> Any:
        pos.retreat()
        return pos

    def end(self) -> Any:
        return self.source.end()

    def size(self) -> int:
        return self.source.size()

    def offset(self, pos: Any, n: int) -> Any:
        return pos + n

    def index(self, pos: Any) -> int:
        return pos.offset
