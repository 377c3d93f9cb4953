"""Tests for common element type resolution."""

import numbers
from typing import Any, Generic, TypeVar

import pytest

from lazyconcat import ReferenceKind, Slot, concat
from lazyconcat._exceptions import ConcatResolutionError, ConcatTypeError
from lazyconcat.concat._resolver import common_type, normalize_type

T = TypeVar("T")


class TypedList(list, Generic[T]):
    pass


def typed(element_type, items=()):
    return Slot(list(items), element_type=element_type)


class TestNormalizeType:

    @pytest.mark.parametrize(
        "declared, expected",
        [
            (int, int),
            (list[int], list),
            (dict[str, int], dict),
            (Any, Any),
            (int | str, Any),
        ],
    )
    def test_normalization(self, declared, expected):
        assert normalize_type(declared) is expected


class TestCommonType:

    def test_every_type_unknown(self):
        assert common_type([Any, Any], "numeric") is Any

    def test_unknown_types_skipped(self):
        assert common_type([Any, int, Any], "strict") is int

    def test_bool_widens_to_int(self):
        assert common_type([bool, int], "strict") is int
        assert common_type([int, bool], "strict") is int

    def test_numeric_tower(self):
        assert common_type([int, float], "numeric") is numbers.Real
        assert common_type([int, complex], "numeric") is numbers.Complex

    def test_error_lists_every_slot(self):
        with pytest.raises(ConcatResolutionError) as exc_info:
            common_type([int, Any, str], "numeric")

        msg = str(exc_info.value)
        assert "Slot 0: int" in msg
        assert "Slot 1: Any" in msg
        assert "Slot 2: str" in msg


class TestImplicitResolution:
    """Element type inferred from the slots."""

    def test_same_element_type(self):
        assert concat(range(3), range(2)).element_type is int

    def test_subclass_widens_to_base(self, hierarchy):
        Foo, Bar, _, _ = hierarchy

        assert concat(typed(Foo), typed(Bar)).element_type is Foo
        assert concat(typed(Bar), typed(Foo)).element_type is Foo

    def test_siblings_resolve_to_common_base(self, hierarchy):
        Foo, Bar, Qux, _ = hierarchy

        assert concat(typed(Bar), typed(Qux)).element_type is Foo

    @pytest.mark.parametrize("order", [(1, 2, 0), (0, 1, 2), (2, 0, 1)])
    def test_three_slots_any_order(self, hierarchy, order):
        classes = hierarchy[:3]
        slots = [typed(classes[i]) for i in order]

        assert concat(*slots).element_type is classes[0]

    def test_unrelated_types_rejected(self, hierarchy):
        _, _, _, Unrelated = hierarchy

        with pytest.raises(ConcatResolutionError, match="No common element type"):
            concat(typed(int), typed(Unrelated))

    def test_str_and_bytes_rejected(self):
        # bytes elements are ints
        with pytest.raises(ConcatResolutionError, match="str, int"):
            concat("ab", b"cd")

    def test_untyped_slots_are_compatible(self):
        assert concat([1], ["a"]).element_type is Any

    def test_untyped_slot_does_not_widen(self):
        assert concat(range(2), [object()]).element_type is int

    def test_generic_declared_type(self):
        view = concat(typed(list[int]), typed(list))
        assert view.element_type is list

    def test_parametrized_instance_declares_element_type(self):
        items = TypedList[int]([1, 2])

        assert concat(items, typed(bool)).element_type is int

    def test_numeric_mode_widens_int_and_float(self):
        view = concat(range(2), typed(float, [2.5]), mode="numeric")
        assert view.element_type is numbers.Real
        assert list(view) == [0, 1, 2.5]

    def test_strict_mode_rejects_int_and_float(self):
        with pytest.raises(ConcatResolutionError, match="Resolution mode: strict"):
            concat(range(2), typed(float), mode="strict")


class TestExplicitElementType:
    """element_type= and convert= arguments."""

    def test_explicit_base_accepted(self, hierarchy):
        Foo, Bar, Qux, _ = hierarchy

        view = concat(typed(Bar), typed(Qux), element_type=Foo)

        assert view.element_type is Foo
        assert view.reference.converters == (None, None)

    def test_explicit_type_for_mixed_order(self, hierarchy):
        Foo, Bar, Qux, _ = hierarchy

        view = concat(typed(Bar), typed(Qux), typed(Foo), element_type=Foo)
        assert view.element_type is Foo

    def test_explicit_object_accepts_anything(self, hierarchy):
        _, _, _, Unrelated = hierarchy

        view = concat(range(2), typed(Unrelated), element_type=object)
        assert view.element_type is object

    def test_incompatible_slot_rejected_without_convert(self):
        with pytest.raises(
            ConcatResolutionError, match="Slot 0 element type int is not a subclass of str"
        ):
            concat(range(2), ["x"], element_type=str)

    def test_convert_applied_to_slots_not_of_element_type(self):
        view = concat(range(2), typed(float, [2.5]), [3], element_type=float, convert=float)

        assert view.reference.converters == (float, None, float)
        assert view.reference.kind is ReferenceKind.PRODUCED
        values = list(view)
        assert values == [0.0, 1.0, 2.5, 3.0]
        assert all(type(v) is float for v in values)

    def test_convert_applied_when_indexing(self):
        view = concat(range(3), element_type=str, convert=str)

        assert view[2] == "2"
        assert view[0:2] == ["0", "1"]

    def test_untyped_slots_accepted_without_convert(self):
        view = concat([1], ["a"], element_type=int)

        assert view.element_type is int
        assert view.reference.converters == (None, None)

    def test_parametrized_element_type_kept(self):
        view = concat(typed(list), element_type=list[int])
        assert view.element_type == list[int]

    def test_convert_without_element_type_rejected(self):
        with pytest.raises(ConcatTypeError, match="requires an explicit element_type"):
            concat([1], convert=str)

    def test_non_callable_convert_rejected(self):
        with pytest.raises(ConcatTypeError, match="convert must be callable"):
            concat([1], element_type=str, convert="str")

    def test_invalid_element_type_rejected(self):
        with pytest.raises(ConcatTypeError, match="element_type must be a class"):
            concat([1], element_type=3)

    def test_unknown_mode_rejected(self):
        with pytest.raises(ConcatResolutionError, match="Unknown resolution mode"):
            concat([1], mode="loose")


class TestReferenceKind:
    """BORROWED vs PRODUCED common references."""

    def test_lists_borrow_their_items(self):
        item = object()
        view = concat([item], [])

        assert view.reference.kind is ReferenceKind.BORROWED
        assert view[0] is item
        assert view.begin().value is item

    def test_range_produces(self):
        assert concat([1], range(2)).reference.kind is ReferenceKind.PRODUCED

    def test_iterator_produces(self):
        assert concat([1], iter([2])).reference.kind is ReferenceKind.PRODUCED

    def test_borrowed_slot_in_produced_view_still_aliases(self, hierarchy):
        Foo, _, _, _ = hierarchy
        stored = Foo()

        view = concat(
            Slot([stored], element_type=Foo),
            Slot(iter([Foo()]), element_type=Foo),
        )

        assert view.reference.kind is ReferenceKind.PRODUCED
        assert view.begin().value is stored
