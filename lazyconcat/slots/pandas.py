"""
Pandas adapter.

Wraps pd.Series with positional (iloc) access.
Requires pandas package: pip install pandas
"""

from __future__ import annotations

from typing import Any

import numpy as np

from lazyconcat._capability import ReferenceKind
from lazyconcat._exceptions import ConcatAdapterError
from lazyconcat.slots.base import IndexedAdapter, Slot

# Check Pandas availability
try:
    import pandas as pd

    HAS_PANDAS = True
except ImportError:
    HAS_PANDAS = False


def _require_pandas() -> None:
    """Raise ConcatAdapterError if Pandas is not available."""
    if not HAS_PANDAS:
        raise ConcatAdapterError(
            "pandas adapter requires pandas package.\n"
            "Install with: pip install pandas"
        )


class PandasAdapter(IndexedAdapter):
    """
    pd.Series slot.

    Positions are positional, never labels: the third element of a series
    indexed [10, 20, 30] is series.iloc[2].
    """

    name = "pandas"
    reference_kind = ReferenceKind.PRODUCED

    def __init__(self, slot: Slot):
        _require_pandas()
        super().__init__(slot)

    @classmethod
    def accepts(cls, source: Any) -> bool:
        return HAS_PANDAS and isinstance(source, pd.Series)

    def _infer_element_type(self) -> Any:
        dtype = self.source.dtype
        if isinstance(dtype, np.dtype) and dtype != np.dtype(object):
            return dtype.type
        return Any

    def size(self) -> int:
        return len(self.source)

    def _get(self, i: int) -> Any:
        return self.source.iloc[i]
