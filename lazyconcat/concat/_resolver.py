"""
Common element resolution.

Decides, before any element is read, which single type every slot's
elements can be viewed as. Concatenation is refused when there is none.

Implicit resolution walks the MRO of the first declared element type and
picks the first class every other declared type derives from; in 'numeric'
mode the numbers tower is tried next. Slots of unknown element type (Any)
are compatible with everything.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass
from types import UnionType
from typing import Any, Callable, Optional, Sequence

from lazyconcat._capability import ReferenceKind
from lazyconcat._constants import NUMERIC_TOWER, ResolutionMode
from lazyconcat._exceptions import ConcatResolutionError
from lazyconcat._logging import get_logger
from lazyconcat.slots.base import SlotAdapter

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommonReference:
    """
    Resolved element type of a concatenation.

    Attributes:
        element_type: Type every dereferenced element is an instance of
            (Any when no slot declares one)
        kind: BORROWED if every element is the stored object itself,
            PRODUCED if at least one slot computes or converts its elements
        converters: Per-slot callable applied on dereference, or None
    """

    element_type: Any
    kind: ReferenceKind
    converters: tuple[Optional[Callable[[Any], Any]], ...]


def type_name(tp: Any) -> str:
    if tp is Any:
        return "Any"
    return getattr(tp, "__qualname__", None) or repr(tp)


def normalize_type(tp: Any) -> Any:
    """Class used for subclass checks: list[int] -> list, unions and other forms -> Any."""
    if tp is Any:
        return tp
    origin = typing.get_origin(tp)
    if origin is None:
        return tp if isinstance(tp, type) else Any
    if isinstance(origin, type) and origin is not UnionType:
        return origin
    return Any


def is_subtype(tp: Any, base: Any) -> bool:
    try:
        return issubclass(tp, base)
    except TypeError:
        # Non-runtime protocols and similar refuse issubclass()
        return False


def common_type(types: Sequence[Any], mode: ResolutionMode) -> Any:
    """
    Narrowest class all `types` derive from.

    Args:
        types: Normalized element types (Any entries are skipped)
        mode: 'numeric' also searches the numbers tower, 'strict' does not

    Returns:
        The common class, or Any if every type is Any

    Raises:
        ConcatResolutionError: If the types share nothing but object
    """
    known = [tp for tp in types if tp is not Any]
    if not known:
        return Any

    candidates = [cls for cls in known[0].__mro__ if cls is not object]
    if mode == "numeric":
        candidates += [cls for cls in NUMERIC_TOWER if cls not in candidates]

    for candidate in candidates:
        if all(is_subtype(tp, candidate) for tp in known):
            return candidate

    slot_info = [f"  Slot {i}: {type_name(tp)}" for i, tp in enumerate(types)]
    raise ConcatResolutionError(
        f"No common element type for slots: "
        f"{', '.join(type_name(tp) for tp in known)}\n"
        f"\n"
        f"Element type per slot:\n" + "\n".join(slot_info) + "\n"
        "\n"
        f"Resolution mode: {mode}\n"
        "Solution: pass an explicit common type, optionally with a converter:\n"
        "  lazyconcat.concat(a, b, element_type=object)\n"
        "  lazyconcat.concat(a, b, element_type=float, convert=float)"
    )


def resolve_common_reference(
    adapters: Sequence[SlotAdapter],
    element_type: Any = None,
    convert: Optional[Callable[[Any], Any]] = None,
    mode: ResolutionMode = "numeric",
) -> CommonReference:
    """
    Resolve the common reference of all slots.

    Args:
        adapters: One adapter per slot, in concatenation order
        element_type: Explicit common type (skips implicit resolution)
        convert: Applied to elements of slots not known to be
            element_type instances; requires element_type
        mode: Resolution mode for implicit resolution

    Returns:
        CommonReference

    Raises:
        ConcatResolutionError: If no common type exists, or a slot is
            incompatible with element_type and no convert was given
    """
    declared = [normalize_type(adapter.element_type) for adapter in adapters]

    if element_type is None:
        resolved = common_type(declared, mode)
        converters: tuple[Optional[Callable[[Any], Any]], ...] = (None,) * len(adapters)
    else:
        resolved = element_type
        target = normalize_type(element_type)
        converters = tuple(
            _slot_converter(i, tp, target, convert) for i, tp in enumerate(declared)
        )

    borrowed = all(
        adapter.reference_kind is ReferenceKind.BORROWED for adapter in adapters
    ) and not any(converters)
    kind = ReferenceKind.BORROWED if borrowed else ReferenceKind.PRODUCED

    logger.debug(
        f"Resolved common reference: {type_name(resolved)} ({kind.value}) "
        f"from [{', '.join(type_name(tp) for tp in declared)}]"
    )
    return CommonReference(element_type=resolved, kind=kind, converters=converters)


def _slot_converter(
    slot_index: int,
    declared: Any,
    target: Any,
    convert: Optional[Callable[[Any], Any]],
) -> Optional[Callable[[Any], Any]]:
    """Converter for one slot against an explicit target type."""
    if target is Any or (declared is not Any and is_subtype(declared, target)):
        return None
    if convert is not None:
        return convert
    if declared is Any:
        return None

    raise ConcatResolutionError(
        f"Slot {slot_index} element type {type_name(declared)} is not a subclass "
        f"of {type_name(target)}.\n"
        f"Pass convert= to turn its elements into {type_name(target)}."
    )
