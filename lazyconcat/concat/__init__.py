"""
Concatenate multiple sequences into a single lazy view.

Public API:
    concat(*sources, element_type, convert, mode) -> ConcatView
        Presents N heterogeneous sources as one sequence without copying.
        The view is as capable as its weakest slot.

Internal modules (not exported):
    _orchestrator: Main concatenation orchestration (4-phase pipeline)
    _validation: Argument validation (arity, element type, mode)
    _resolver: Common element type resolution across slots
    _cursor: Cursor classes per capability and the EndMarker
    _view: View classes per (capability, sized) combination

Architecture:
    concat() orchestrates a 4-phase process:
    1. Validation: Check arguments (_validation.py)
    2. Adaptation: Wrap sources in slot adapters (lazyconcat.slots)
    3. Resolution: Resolve the common reference (_resolver.py)
    4. Construction: Instantiate the matching view (_view.py)
"""

from lazyconcat.concat._cursor import (
    BidirectionalCursor,
    EndMarker,
    ForwardCursor,
    InputCursor,
    RandomAccessCursor,
)
from lazyconcat.concat._orchestrator import concat
from lazyconcat.concat._resolver import CommonReference
from lazyconcat.concat._view import (
    BidirectionalConcatView,
    ConcatView,
    ForwardConcatView,
    RandomAccessConcatView,
    SizedBidirectionalConcatView,
    SizedConcatView,
    SizedForwardConcatView,
)

__all__ = [
    "BidirectionalConcatView",
    "BidirectionalCursor",
    "CommonReference",
    "ConcatView",
    "EndMarker",
    "ForwardConcatView",
    "ForwardCursor",
    "InputCursor",
    "RandomAccessConcatView",
    "RandomAccessCursor",
    "SizedBidirectionalConcatView",
    "SizedConcatView",
    "SizedForwardConcatView",
    "concat",
]
