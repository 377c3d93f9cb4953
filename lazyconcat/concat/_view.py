"""
Concatenated views.

One class per (joint capability, sized) combination, so a view only has
the operations every slot supports: no __len__ unless every slot is sized,
no __reversed__ below BIDIRECTIONAL, no indexing below RANDOM_ACCESS.

    capability      unsized                   sized
    INPUT           ConcatView                SizedConcatView
    FORWARD         ForwardConcatView         SizedForwardConcatView
    BIDIRECTIONAL   BidirectionalConcatView   SizedBidirectionalConcatView
    RANDOM_ACCESS   -                         RandomAccessConcatView
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Any, Generic, Iterator, TypeVar, Union

from lazyconcat._capability import Capability, weakest_slots
from lazyconcat._constants import REPR_MAX_SLOTS
from lazyconcat._exceptions import ConcatCapabilityError
from lazyconcat.concat._cursor import (
    CURSOR_CLASSES,
    EndMarker,
    InputCursor,
    RandomAccessCursor,
)
from lazyconcat.concat._resolver import CommonReference, type_name
from lazyconcat.slots.base import Slot, SlotAdapter

T = TypeVar("T")


class ConcatView(Generic[T]):
    """
    Lazy concatenation of N slots, single pass.

    Nothing is copied or buffered: every element is read from its slot when
    a cursor dereferences it. With an iterator slot the view can be
    traversed once; traversing again resumes where the iterator stopped.

    Usage:
        view = lazyconcat.concat([1, 2], (n * n for n in range(3)))
        list(view)  # [1, 2, 0, 1, 4]

        it, end = view.begin(), view.end()
        while it != end:
            print(it.value)
            it.advance()
    """

    capability = Capability.INPUT

    def __init__(self, adapters: Sequence[SlotAdapter], reference: CommonReference):
        self._adapters = tuple(adapters)
        self._reference = reference
        self._common = self.capability >= Capability.FORWARD and all(
            adapter.common for adapter in self._adapters
        )

    @property
    def slots(self) -> tuple[Slot, ...]:
        return tuple(adapter.slot for adapter in self._adapters)

    @property
    def adapters(self) -> tuple[SlotAdapter, ...]:
        return self._adapters

    @property
    def reference(self) -> CommonReference:
        return self._reference

    @property
    def element_type(self) -> Any:
        return self._reference.element_type

    @property
    def is_common(self) -> bool:
        """end() returns a cursor of the same class as begin()."""
        return self._common

    @property
    def _cursor_class(self) -> type[InputCursor]:
        return CURSOR_CLASSES[self.capability]

    def begin(self) -> InputCursor:
        """Cursor on the first element of the first non-empty slot."""
        return self._cursor_class.at_begin(self._adapters, self._reference.converters)

    def end(self) -> Union[InputCursor, EndMarker]:
        """
        End of the concatenation.

        A cursor at the end of the last slot when every slot is common,
        otherwise an EndMarker.
        """
        if self._common:
            return self._cursor_class.at_end(self._adapters, self._reference.converters)
        return EndMarker(self._adapters[-1])

    def __iter__(self) -> Iterator[T]:
        cursor = self.begin()
        end = self.end()
        while cursor != end:
            yield cursor.value
            cursor.advance()

    def require(self, capability: Capability) -> None:
        """
        Assert the view supports `capability`.

        Raises:
            ConcatCapabilityError: Naming the slots that fall short
        """
        if self.capability >= capability:
            return

        weak = weakest_slots(self._adapters, capability)
        slot_info = [
            f"  Slot {i}: '{self._adapters[i].name}' is "
            f"{self._adapters[i].capability.name}"
            for i in weak
        ]
        if not slot_info:
            slot_info = ["  (every slot qualifies, but not every slot is sized/common)"]

        raise ConcatCapabilityError(
            f"View is {self.capability.name}, {capability.name} required\n"
            + "\n".join(slot_info)
        )

    def close(self) -> None:
        """Close every owned slot that can be closed. Borrowed slots are untouched."""
        for adapter in self._adapters:
            adapter.slot.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        names = [
            f"{adapter.name}({type(adapter.source).__name__})"
            for adapter in self._adapters[:REPR_MAX_SLOTS]
        ]
        if len(self._adapters) > REPR_MAX_SLOTS:
            names.append(f"... +{len(self._adapters) - REPR_MAX_SLOTS}")
        return (
            f"{type(self).__name__}([{', '.join(names)}], "
            f"element_type={type_name(self.element_type)}, "
            f"capability={self.capability.name})"
        )


class _SizedMixin:
    """size() and __len__ for views whose every slot is sized."""

    _adapters: tuple[SlotAdapter, ...]

    def size(self) -> int:
        """Sum of slot sizes, read live."""
        return sum(adapter.size() for adapter in self._adapters)

    def __len__(self) -> int:
        return self.size()


class SizedConcatView(_SizedMixin, ConcatView[T]):
    """Single-pass view over sized slots."""


class ForwardConcatView(ConcatView[T]):
    """Multi-pass view. Cursors can be copied and compared."""

    capability = Capability.FORWARD


class SizedForwardConcatView(_SizedMixin, ForwardConcatView[T]):
    """Multi-pass view over sized slots."""


class BidirectionalConcatView(ForwardConcatView[T]):
    """Multi-pass view that also iterates backwards."""

    capability = Capability.BIDIRECTIONAL

    def __reversed__(self) -> Iterator[T]:
        cursor = self.end()
        begin = self.begin()
        while cursor != begin:
            cursor.retreat()  # type: ignore[union-attr]
            yield cursor.value  # type: ignore[union-attr]


class SizedBidirectionalConcatView(_SizedMixin, BidirectionalConcatView[T]):
    """Bidirectional view over sized slots."""


class RandomAccessConcatView(_SizedMixin, BidirectionalConcatView[T], Sequence):
    """
    Random-access view. A read-only collections.abc.Sequence.

    Integer indexing resolves the slot by a prefix-sum scan over slot sizes;
    slicing returns a list of the selected elements.
    """

    capability = Capability.RANDOM_ACCESS

    def cursor_at(self, offset: int) -> RandomAccessCursor:
        """Cursor on global `offset` (len(self) gives the end cursor)."""
        return RandomAccessCursor.at_offset(
            self._adapters, self._reference.converters, operator.index(offset)
        )

    def __getitem__(self, key):
        if isinstance(key, slice):
            return [self[i] for i in range(*key.indices(len(self)))]

        index = operator.index(key)
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("concat view index out of range")

        for adapter, convert in zip(self._adapters, self._reference.converters):
            slot_size = adapter.size()
            if index < slot_size:
                item = adapter.deref(adapter.offset(adapter.begin(), index))
                return item if convert is None else convert(item)
            index -= slot_size

        raise IndexError("concat view index out of range")


_VIEW_CLASSES: dict[tuple[Capability, bool], type[ConcatView]] = {
    (Capability.INPUT, False): ConcatView,
    (Capability.INPUT, True): SizedConcatView,
    (Capability.FORWARD, False): ForwardConcatView,
    (Capability.FORWARD, True): SizedForwardConcatView,
    (Capability.BIDIRECTIONAL, False): BidirectionalConcatView,
    (Capability.BIDIRECTIONAL, True): SizedBidirectionalConcatView,
    (Capability.RANDOM_ACCESS, True): RandomAccessConcatView,
}


def view_class(capability: Capability, sized: bool) -> type[ConcatView]:
    """View class for a joint capability and sizedness."""
    if capability is Capability.RANDOM_ACCESS and not sized:
        capability = Capability.BIDIRECTIONAL
    return _VIEW_CLASSES[(capability, sized)]
