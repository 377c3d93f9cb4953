"""Integration tests mixing columnar sources with Python sequences."""

import datetime
import numbers
from typing import Any

import numpy as np
import pyarrow as pa
import pytest

from lazyconcat import RandomAccessConcatView, ReferenceKind, Slot, concat
from lazyconcat._exceptions import ConcatResolutionError
from lazyconcat.slots import adapt
from lazyconcat.slots.pyarrow import arrow_python_type


class TestArrowSlots:

    def test_arrow_array_with_list(self):
        view = concat(pa.array([1, 2]), [3])

        assert isinstance(view, RandomAccessConcatView)
        assert view.element_type is int
        assert view.reference.kind is ReferenceKind.PRODUCED
        assert list(view) == [1, 2, 3]
        assert view[1] == 2

    def test_chunked_array_indexes_across_chunks(self):
        view = concat(pa.chunked_array([[1, 2], [3]]), range(4, 6))

        assert len(view) == 5
        assert list(view) == [1, 2, 3, 4, 5]
        assert view[2] == 3
        assert view.cursor_at(3).slot_index == 1

    def test_nulls_dereference_as_none(self):
        view = concat(pa.array([1, None]), [3])

        assert list(view) == [1, None, 3]

    def test_strings_and_ints_rejected(self):
        with pytest.raises(ConcatResolutionError, match="str, int"):
            concat(pa.array(["a"]), pa.array([1]))

    def test_strings_with_python_strings(self):
        view = concat(pa.array(["a", "b"]), "cd")

        assert view.element_type is str
        assert "".join(view) == "abcd"

    @pytest.mark.parametrize(
        "arrow_type, expected",
        [
            (pa.bool_(), bool),
            (pa.int8(), int),
            (pa.float32(), float),
            (pa.large_string(), str),
            (pa.binary(), bytes),
            (pa.timestamp("us"), datetime.datetime),
            (pa.date32(), datetime.date),
            (pa.list_(pa.int64()), list),
            (pa.struct([("x", pa.int64())]), dict),
            (pa.null(), Any),
        ],
    )
    def test_arrow_python_type(self, arrow_type, expected):
        assert arrow_python_type(arrow_type) is expected


class TestNumpySlots:

    def test_numpy_ints_and_python_ints_resolve_to_integral(self):
        view = concat(np.array([1, 2]), range(3))

        assert view.element_type is numbers.Integral
        assert list(view) == [1, 2, 0, 1, 2]

    def test_numpy_float64_is_a_float(self):
        view = concat(np.array([1.5]), Slot([2.0], element_type=float))

        assert view.element_type is float
        assert view[0] == 1.5

    def test_strict_mode_rejects_numpy_with_python_ints(self):
        with pytest.raises(ConcatResolutionError):
            concat(np.array([1, 2]), range(3), mode="strict")

    def test_two_dimensional_array_yields_rows(self):
        view = concat(np.arange(6).reshape(3, 2), [np.array([6, 7])])

        assert len(view) == 4
        assert view.element_type is np.ndarray
        np.testing.assert_array_equal(view[1], np.array([2, 3]))
        np.testing.assert_array_equal(view[-1], np.array([6, 7]))

    def test_object_array_is_untyped(self):
        assert adapt(Slot(np.array([1, "a"], dtype=object))).element_type is Any

    def test_mixed_columnar_and_python(self):
        view = concat(pa.array([1]), np.array([2]), [3], range(4, 5))

        assert view.element_type is numbers.Integral
        assert list(view) == [1, 2, 3, 4]
        assert list(reversed(view)) == [4, 3, 2, 1]


@pytest.mark.pandas
class TestPandasSlots:

    def test_series_indexed_by_position(self):
        pd = pytest.importorskip("pandas")
        series = pd.Series([10, 20], index=[5, 6])

        view = concat(series, [30])

        assert adapt(Slot(series)).name == "pandas"
        assert view[0] == 10
        assert list(view) == [10, 20, 30]

    def test_series_dtype_element_type(self):
        pd = pytest.importorskip("pandas")

        view = concat(pd.Series([1.5, 2.5]), Slot([3.5], element_type=float))

        assert view.element_type is float


@pytest.mark.polars
class TestPolarsSlots:

    def test_series_with_range(self):
        pl = pytest.importorskip("polars")

        view = concat(pl.Series([1, 2]), range(1))

        assert adapt(Slot(pl.Series([1]))).name == "polars"
        assert view.element_type is int
        assert list(view) == [1, 2, 0]

    def test_string_series(self):
        pl = pytest.importorskip("polars")

        view = concat(pl.Series(["a"]), "b")

        assert view.element_type is str
        assert list(view) == ["a", "b"]
