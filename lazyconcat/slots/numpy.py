"""
NumPy adapter.

Wraps np.ndarray along its first axis. Elements are numpy scalars
(1-D) or row views (n-D). 0-d arrays are scalars and are rejected.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from lazyconcat._capability import ReferenceKind
from lazyconcat._exceptions import ConcatTypeError
from lazyconcat.slots.base import IndexedAdapter, Slot


class NumpyAdapter(IndexedAdapter):
    """np.ndarray slot, indexed along axis 0."""

    name = "numpy"
    reference_kind = ReferenceKind.PRODUCED

    def __init__(self, slot: Slot):
        if slot.source.ndim == 0:
            raise ConcatTypeError(
                f"0-d numpy array is a scalar, not a traversable sequence: "
                f"{slot.source!r}\n"
                f"Wrap it first: np.atleast_1d(value)"
            )
        super().__init__(slot)

    @classmethod
    def accepts(cls, source: Any) -> bool:
        return isinstance(source, np.ndarray)

    def _infer_element_type(self) -> Any:
        if self.source.ndim > 1:
            return np.ndarray
        if self.source.dtype == np.dtype(object):
            return Any
        return self.source.dtype.type

    def size(self) -> int:
        return self.source.shape[0]

    def _get(self, i: int) -> Any:
        return self.source[i]
