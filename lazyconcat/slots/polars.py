"""
Polars adapter.

Wraps pl.Series. Indexing a Series yields plain Python values.
Requires polars package: pip install polars
"""

from __future__ import annotations

import datetime
from typing import Any

from lazyconcat._capability import ReferenceKind
from lazyconcat._exceptions import ConcatAdapterError
from lazyconcat.slots.base import IndexedAdapter, Slot

# Check Polars availability
try:
    import polars as pl

    HAS_POLARS = True
except ImportError:
    HAS_POLARS = False


def _require_polars() -> None:
    """Raise ConcatAdapterError if Polars is not available."""
    if not HAS_POLARS:
        raise ConcatAdapterError(
            "polars adapter requires polars package.\n"
            "Install with: pip install polars"
        )


def polars_python_type(dtype: Any) -> Any:
    """Python type of values in a Series of `dtype`, else Any."""
    if dtype == pl.Boolean:
        return bool
    if dtype.is_integer():
        return int
    if dtype.is_float():
        return float
    if dtype == pl.String:
        return str
    if dtype == pl.Binary:
        return bytes
    if dtype == pl.Datetime:
        return datetime.datetime
    if dtype == pl.Date:
        return datetime.date
    return Any


class PolarsAdapter(IndexedAdapter):
    """pl.Series slot."""

    name = "polars"
    reference_kind = ReferenceKind.PRODUCED

    def __init__(self, slot: Slot):
        _require_polars()
        super().__init__(slot)

    @classmethod
    def accepts(cls, source: Any) -> bool:
        return HAS_POLARS and isinstance(source, pl.Series)

    def _infer_element_type(self) -> Any:
        return polars_python_type(self.source.dtype)

    def size(self) -> int:
        return len(self.source)

    def _get(self, i: int) -> Any:
        return self.source[i]
