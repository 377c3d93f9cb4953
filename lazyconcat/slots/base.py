"""
Abstract base class for slot adapters.

Each adapter wraps one family of sources (Python sequences, iterators,
pyarrow arrays, ...) behind the same position protocol, so the cursor can
walk any mix of them without knowing what they are.
"""

from __future__ import annotations

import typing
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any, ClassVar, Optional

from lazyconcat._capability import Capability, Ownership, ReferenceKind
from lazyconcat._exceptions import ConcatTypeError


@dataclass(frozen=True)
class Slot:
    """
    One input sequence of a concatenation, with its ownership fixed.

    Ownership defaults to OWNED for iterators (the view consumes them)
    and BORROWED for everything else. Strings "owned"/"borrowed" are
    accepted. Once built, a Slot never changes.

    Args:
        source: Any traversable object
        ownership: Ownership, "owned", "borrowed" or None (infer)
        element_type: Declared element type (overrides inference)
        unbounded: Source never ends; comparison with the end marker
            is always False and never consumes anything

    Example:
        >>> view = lazyconcat.concat(Slot(rows, element_type=dict), more_rows)
    """

    source: Any
    ownership: Optional[Ownership] = None
    element_type: Any = None
    unbounded: bool = False

    def __post_init__(self):
        if isinstance(self.source, Slot):
            raise ConcatTypeError("Slot cannot wrap another Slot")

        ownership = self.ownership
        if ownership is None:
            ownership = (
                Ownership.OWNED
                if isinstance(self.source, Iterator)
                else Ownership.BORROWED
            )
        elif isinstance(ownership, str):
            try:
                ownership = Ownership(ownership)
            except ValueError:
                raise ConcatTypeError(
                    f"Invalid ownership: {ownership!r}. Use 'owned' or 'borrowed'"
                ) from None
        elif not isinstance(ownership, Ownership):
            raise ConcatTypeError(
                f"Invalid ownership: {ownership!r}. Use 'owned' or 'borrowed'"
            )

        object.__setattr__(self, "ownership", ownership)

    @property
    def owned(self) -> bool:
        return self.ownership is Ownership.OWNED

    def close(self) -> None:
        """Close the source if this slot owns it and it can be closed."""
        if not self.owned:
            return
        close = getattr(self.source, "close", None)
        if callable(close):
            close()


def declared_element_type(source: Any) -> Any:
    """Element type from a parametrized generic instance (MyList[int]()), else Any."""
    orig = getattr(source, "__orig_class__", None)
    args = typing.get_args(orig) if orig is not None else ()
    return args[0] if args else Any


def consume(iterator: Iterator, n: int) -> None:
    """Advance iterator n steps without keeping anything."""
    deque(islice(iterator, n), maxlen=0)


class SlotAdapter(ABC):
    """
    Abstract position protocol over one slot.

    Positions are opaque to the cursor. Every adapter implements:
    - begin(), at_end(), next(), deref()  (all capabilities)
    - same(), copy()                      (FORWARD and up)
    - is_begin(), prev(), end()           (BIDIRECTIONAL and up)
    - offset(), index(), size()           (RANDOM_ACCESS / sized)

    Class attributes describe what the family supports; instances may
    narrow them (e.g. an unsized iterable is not common).
    """

    name: ClassVar[str]
    capability: ClassVar[Capability]
    reference_kind: ReferenceKind = ReferenceKind.BORROWED
    unbounded: ClassVar[bool] = False

    def __init__(self, slot: Slot):
        self.slot = slot
        self.source = slot.source

    @classmethod
    @abstractmethod
    def accepts(cls, source: Any) -> bool:
        """Whether this adapter handles `source`."""
        pass

    @property
    def sized(self) -> bool:
        """size() is available and O(1)."""
        return False

    @property
    def common(self) -> bool:
        """end() returns a real position comparable with same()."""
        return False

    @property
    def element_type(self) -> Any:
        if self.slot.element_type is not None:
            return self.slot.element_type
        return self._infer_element_type()

    def _infer_element_type(self) -> Any:
        return declared_element_type(self.source)

    @abstractmethod
    def begin(self) -> Any:
        pass

    @abstractmethod
    def at_end(self, pos: Any) -> bool:
        pass

    @abstractmethod
    def next(self, pos: Any) -> Any:
        pass

    @abstractmethod
    def deref(self, pos: Any) -> Any:
        pass

    def same(self, a: Any, b: Any) -> bool:
        return a == b

    def copy(self, pos: Any) -> Any:
        return pos

    def is_begin(self, pos: Any) -> bool:
        raise NotImplementedError(f"'{self.name}' slots cannot detect their begin")

    def prev(self, pos: Any) -> Any:
        raise NotImplementedError(f"'{self.name}' slots cannot step backwards")

    def end(self) -> Any:
        raise NotImplementedError(f"'{self.name}' slots have no end position")

    def size(self) -> int:
        raise NotImplementedError(f"'{self.name}' slots are not sized")

    def offset(self, pos: Any, n: int) -> Any:
        raise NotImplementedError(f"'{self.name}' slots have no random access")

    def index(self, pos: Any) -> int:
        raise NotImplementedError(f"'{self.name}' slots have no random access")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {type(self.source).__name__}>"


class IndexedAdapter(SlotAdapter):
    """
    Shared base for random-access sources. Positions are plain ints.

    Subclasses provide size() and _get(i).
    """

    capability = Capability.RANDOM_ACCESS

    @property
    def sized(self) -> bool:
        return True

    @property
    def common(self) -> bool:
        return True

    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def _get(self, i: int) -> Any:
        pass

    def begin(self) -> int:
        return 0

    def end(self) -> int:
        return self.size()

    def at_end(self, pos: int) -> bool:
        return pos >= self.size()

    def is_begin(self, pos: int) -> bool:
        return pos == 0

    def next(self, pos: int) -> int:
        return pos + 1

    def prev(self, pos: int) -> int:
        return pos - 1

    def offset(self, pos: int, n: int) -> int:
        return pos + n

    def index(self, pos: int) -> int:
        return pos

    def deref(self, pos: int) -> Any:
        return self._get(pos)


_PENDING = 0
_READY = 1
_EXHAUSTED = 2


class WalkPosition:
    """
    Position inside a source that can only be walked, not indexed.

    Holds the element index, the live forward iterator (None until needed),
    the looked-ahead item, and an optional reverse iterator whose next item
    is element index - 1.
    """

    __slots__ = ("index", "iterator", "item", "state", "rewind")

    def __init__(self, index: int = 0, iterator: Optional[Iterator] = None):
        self.index = index
        self.iterator = iterator
        self.item: Any = None
        self.state = _PENDING
        self.rewind: Optional[Iterator] = None

    def __repr__(self) -> str:
        return f"WalkPosition({self.index})"


class WalkAdapter(SlotAdapter):
    """
    Shared base for sources walked with iter()/reversed().

    Items are fetched lazily: a position only pulls from its iterator when
    it is dereferenced or checked against the end.
    """

    def begin(self) -> WalkPosition:
        return WalkPosition(0)

    def _open(self, pos: WalkPosition) -> None:
        iterator = iter(self.source)
        consume(iterator, pos.index)
        pos.iterator = iterator

    def _fetch(self, pos: WalkPosition) -> None:
        if pos.state != _PENDING:
            return
        if self.sized and pos.index >= self.size():
            pos.state = _EXHAUSTED
            return
        if pos.iterator is None:
            self._open(pos)
        try:
            pos.item = next(pos.iterator)
            pos.state = _READY
        except StopIteration:
            pos.state = _EXHAUSTED

    def at_end(self, pos: WalkPosition) -> bool:
        self._fetch(pos)
        return pos.state == _EXHAUSTED

    def deref(self, pos: WalkPosition) -> Any:
        self._fetch(pos)
        if pos.state == _EXHAUSTED:
            raise IndexError(f"'{self.name}' slot dereferenced at its end")
        return pos.item

    def next(self, pos: WalkPosition) -> WalkPosition:
        if pos.state == _PENDING and pos.iterator is not None:
            consume(pos.iterator, 1)
        pos.index += 1
        pos.item = None
        pos.state = _PENDING
        pos.rewind = None
        return pos

    def same(self, a: WalkPosition, b: WalkPosition) -> bool:
        return a.index == b.index

    def copy(self, pos: WalkPosition) -> WalkPosition:
        clone = WalkPosition(pos.index)
        if pos.state == _READY:
            clone.item = pos.item
            clone.state = _READY
        return clone

    def is_begin(self, pos: WalkPosition) -> bool:
        return pos.index == 0
