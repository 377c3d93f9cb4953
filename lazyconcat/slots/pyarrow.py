"""
PyArrow adapter.

Default columnar adapter, no extra dependencies. Wraps pa.Array and
pa.ChunkedArray; dereferencing converts the scalar with as_py().
"""

from __future__ import annotations

import datetime
import decimal
from typing import Any

import pyarrow as pa

from lazyconcat._capability import ReferenceKind
from lazyconcat.slots.base import IndexedAdapter


def arrow_python_type(arrow_type: pa.DataType) -> Any:
    """Python type produced by as_py() for values of `arrow_type`, else Any."""
    types = pa.types
    if types.is_boolean(arrow_type):
        return bool
    if types.is_integer(arrow_type):
        return int
    if types.is_floating(arrow_type):
        return float
    if types.is_string(arrow_type) or types.is_large_string(arrow_type):
        return str
    if types.is_binary(arrow_type) or types.is_large_binary(arrow_type):
        return bytes
    if types.is_timestamp(arrow_type):
        return datetime.datetime
    if types.is_date(arrow_type):
        return datetime.date
    if types.is_decimal(arrow_type):
        return decimal.Decimal
    if types.is_list(arrow_type) or types.is_large_list(arrow_type):
        return list
    if types.is_struct(arrow_type):
        return dict
    return Any


class ArrowAdapter(IndexedAdapter):
    """
    PyArrow Array / ChunkedArray slot.

    Nulls dereference as None; declare element_type=object on the Slot
    if that matters for resolution.
    """

    name = "pyarrow"
    reference_kind = ReferenceKind.PRODUCED

    @classmethod
    def accepts(cls, source: Any) -> bool:
        return isinstance(source, (pa.Array, pa.ChunkedArray))

    def _infer_element_type(self) -> Any:
        return arrow_python_type(self.source.type)

    def size(self) -> int:
        return len(self.source)

    def _get(self, i: int) -> Any:
        return self.source[i].as_py()
