"""
Adapters for re-iterable collections that cannot be indexed.

- ReversibleAdapter: sized and reversible (dict, dict views, OrderedDict).
  Bidirectional.
- IterableAdapter: anything else with __iter__ that is not an iterator
  (set, frozenset, custom collections). Forward, sized when Sized.

Both re-walk the source instead of buffering it: copying a position costs
nothing until it is used, then walks from the front once.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Reversible, Sequence, Sized
from typing import Any

from lazyconcat._capability import Capability
from lazyconcat.slots.base import WalkAdapter, WalkPosition, _READY, consume


class IterableAdapter(WalkAdapter):
    """Multi-pass iterable slot. Forward only."""

    name = "iterable"
    capability = Capability.FORWARD

    @classmethod
    def accepts(cls, source: Any) -> bool:
        return isinstance(source, Iterable) and not isinstance(source, Iterator)

    @property
    def sized(self) -> bool:
        return isinstance(self.source, Sized)

    @property
    def common(self) -> bool:
        # Without a size the end is only found by walking into it
        return self.sized

    def size(self) -> int:
        return len(self.source)

    def end(self) -> WalkPosition:
        if not self.sized:
            return super().end()
        return WalkPosition(self.size())


class ReversibleAdapter(IterableAdapter):
    """Sized, reversible, non-indexable slot. Bidirectional."""

    name = "reversible"
    capability = Capability.BIDIRECTIONAL

    @classmethod
    def accepts(cls, source: Any) -> bool:
        return (
            isinstance(source, Reversible)
            and isinstance(source, Sized)
            and not isinstance(source, (Sequence, Iterator))
        )

    def prev(self, pos: WalkPosition) -> WalkPosition:
        if pos.index <= 0:
            raise IndexError(f"'{self.name}' slot stepped back past its begin")

        if pos.rewind is None:
            rewind = reversed(self.source)
            consume(rewind, self.size() - pos.index)
            pos.rewind = rewind

        pos.item = next(pos.rewind)
        pos.index -= 1
        pos.iterator = None
        pos.state = _READY
        return pos
