"""
Cursors over a concatenation, and the lightweight end marker.

A cursor is (slot index, native position in that slot). It never rests on
an exhausted slot except the last one: every move ends by skipping forward
over empty slots.

Class per capability, each adding operations to the previous one:
    InputCursor          value, advance(), == EndMarker
    ForwardCursor        copy(), == cursor
    BidirectionalCursor  retreat()
    RandomAccessCursor   offset, +, -, +=, -=, [n], ordering
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Optional, Sequence

from lazyconcat._capability import Capability
from lazyconcat.slots.base import SlotAdapter

Converters = Sequence[Optional[Callable[[Any], Any]]]


class EndMarker:
    """
    End of a concatenation whose slots have no comparable end position.

    Carries only the last slot. A cursor equals it when it sits on the last
    slot and that slot reports its position at end. For an unbounded last
    slot that never happens.
    """

    __slots__ = ("_last",)

    def __init__(self, last: SlotAdapter):
        self._last = last

    @property
    def last(self) -> SlotAdapter:
        return self._last

    def __eq__(self, other: object) -> bool:
        if isinstance(other, InputCursor):
            return other._at_end()
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"EndMarker({self._last.name})"


class InputCursor:
    """Single-pass cursor. Only comparable with the EndMarker."""

    __slots__ = ("_adapters", "_converters", "_index", "_pos")

    capability = Capability.INPUT

    def __init__(
        self,
        adapters: Sequence[SlotAdapter],
        converters: Converters,
        index: int,
        pos: Any,
    ):
        self._adapters = adapters
        self._converters = converters
        self._index = index
        self._pos = pos

    @classmethod
    def at_begin(cls, adapters: Sequence[SlotAdapter], converters: Converters):
        """Cursor on the first element (or the end if every slot is empty)."""
        cursor = cls(adapters, converters, 0, adapters[0].begin())
        cursor._skip_exhausted()
        return cursor

    @classmethod
    def at_end(cls, adapters: Sequence[SlotAdapter], converters: Converters):
        """Cursor past the last element. Only valid if the last slot is common."""
        last = len(adapters) - 1
        return cls(adapters, converters, last, adapters[last].end())

    @property
    def slot_index(self) -> int:
        return self._index

    @property
    def position(self) -> Any:
        """Native position inside the active slot."""
        return self._pos

    @property
    def value(self) -> Any:
        """Dereference: the active slot's element, converted if required."""
        item = self._adapters[self._index].deref(self._pos)
        convert = self._converters[self._index]
        return item if convert is None else convert(item)

    def advance(self) -> None:
        """Step to the next element, crossing into later slots as needed."""
        self._pos = self._adapters[self._index].next(self._pos)
        self._skip_exhausted()

    def _skip_exhausted(self) -> None:
        adapters = self._adapters
        last = len(adapters) - 1
        while self._index < last and adapters[self._index].at_end(self._pos):
            self._index += 1
            self._pos = adapters[self._index].begin()

    def _at_end(self) -> bool:
        adapters = self._adapters
        return self._index == len(adapters) - 1 and adapters[-1].at_end(self._pos)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EndMarker):
            return self._at_end()
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(slot={self._index}, position={self._pos!r})"


class ForwardCursor(InputCursor):
    """Multi-pass cursor. Copies advance independently."""

    __slots__ = ()

    capability = Capability.FORWARD

    def copy(self):
        adapter = self._adapters[self._index]
        return type(self)(
            self._adapters, self._converters, self._index, adapter.copy(self._pos)
        )

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ForwardCursor):
            if other._adapters is not self._adapters:
                return False
            return self._index == other._index and self._adapters[self._index].same(
                self._pos, other._pos
            )
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]


class BidirectionalCursor(ForwardCursor):
    """Cursor that can also step back."""

    __slots__ = ()

    capability = Capability.BIDIRECTIONAL

    def retreat(self) -> None:
        """
        Step to the previous element, crossing into earlier slots as needed.

        Raises:
            IndexError: If already on the first element
        """
        adapters = self._adapters
        while adapters[self._index].is_begin(self._pos):
            if self._index == 0:
                raise IndexError("Cursor retreated before the first element")
            self._index -= 1
            self._pos = adapters[self._index].end()
        self._pos = adapters[self._index].prev(self._pos)


class RandomAccessCursor(BidirectionalCursor):
    """
    Cursor with constant-per-slot offsets.

    The slot holding a global offset is found by recomputing prefix sums
    over slot sizes, a linear scan over the (few) slots.
    """

    __slots__ = ()

    capability = Capability.RANDOM_ACCESS

    @classmethod
    def at_offset(
        cls, adapters: Sequence[SlotAdapter], converters: Converters, offset: int
    ):
        cursor = cls(adapters, converters, 0, adapters[0].begin())
        cursor._seek(offset)
        return cursor

    @property
    def offset(self) -> int:
        """Global index of the element under the cursor."""
        adapters = self._adapters
        before = sum(adapters[i].size() for i in range(self._index))
        return before + adapters[self._index].index(self._pos)

    def _seek(self, target: int) -> None:
        adapters = self._adapters
        if target < 0:
            raise IndexError(f"Cursor offset {target} is before the first element")

        remaining = target
        for i, adapter in enumerate(adapters):
            size = adapter.size()
            if remaining < size:
                self._index = i
                self._pos = adapter.offset(adapter.begin(), remaining)
                return
            remaining -= size

        if remaining > 0:
            raise IndexError(
                f"Cursor offset {target} is past the end ({target - remaining})"
            )
        last = len(adapters) - 1
        self._index = last
        self._pos = adapters[last].end()

    def __iadd__(self, n: int):
        self._seek(self.offset + operator.index(n))
        return self

    def __isub__(self, n: int):
        self._seek(self.offset - operator.index(n))
        return self

    def __add__(self, n: int):
        try:
            n = operator.index(n)
        except TypeError:
            return NotImplemented
        moved = self.copy()
        moved += n
        return moved

    __radd__ = __add__

    def __sub__(self, other: Any):
        if isinstance(other, RandomAccessCursor):
            return self.offset - other.offset
        try:
            n = operator.index(other)
        except TypeError:
            return NotImplemented
        return self + (-n)

    def __getitem__(self, n: int) -> Any:
        return (self + n).value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RandomAccessCursor):
            return NotImplemented
        return self.offset < other.offset

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RandomAccessCursor):
            return NotImplemented
        return self.offset <= other.offset

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RandomAccessCursor):
            return NotImplemented
        return self.offset > other.offset

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RandomAccessCursor):
            return NotImplemented
        return self.offset >= other.offset


CURSOR_CLASSES: dict[Capability, type[InputCursor]] = {
    Capability.INPUT: InputCursor,
    Capability.FORWARD: ForwardCursor,
    Capability.BIDIRECTIONAL: BidirectionalCursor,
    Capability.RANDOM_ACCESS: RandomAccessCursor,
}
"""Cursor class exposing exactly the operations of each capability."""
