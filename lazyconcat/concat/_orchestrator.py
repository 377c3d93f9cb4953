"""
Main concatenation orchestrator.

Coordinates the 4-phase concat process:
1. Validation: Check arity, element type, converter and mode
2. Adaptation: Wrap every source in a Slot and its slot adapter
3. Resolution: Resolve the common reference of all slots
4. Construction: Pick the view class from joint capability and sizedness
"""

from typing import Any, Callable, Optional

from lazyconcat._capability import joint_capability
from lazyconcat._logging import get_logger
from lazyconcat.concat._resolver import resolve_common_reference
from lazyconcat.concat._validation import validate_arguments
from lazyconcat.concat._view import ConcatView, view_class
from lazyconcat.slots import Slot, adapt

logger = get_logger(__name__)


def concat(
    *sources: Any,
    element_type: Any = None,
    convert: Optional[Callable[[Any], Any]] = None,
    mode: Optional[str] = None,
) -> ConcatView:
    """
    Concatenate sources into a single lazy view.

    Nothing is read from any source here: validation, element type
    resolution and capability classification only look at the sources'
    types and declared element types.

    Args:
        *sources: One or more traversable sources, in iteration order.
            Wrap a source in Slot(...) to set its ownership or declare its
            element type.
        element_type: Explicit common element type (skips inference)
        convert: Converter for elements of slots whose element type is not
            known to be element_type (requires element_type)
        mode: Resolution mode ("numeric" or "strict"), defaults to the
            global mode set with lazyconcat.use()

    Returns:
        ConcatView subclass matching the joint capability:
        RandomAccessConcatView when every slot is indexable and sized,
        down to ConcatView (single pass) when any slot is an iterator

    Raises:
        ConcatArityError: If no source is given
        ConcatTypeError: If a source is not traversable
        ConcatResolutionError: If the slots have no common element type

    Examples:
        >>> view = concat([], [4, 5], [], [6])
        >>> list(view), len(view)
        ([4, 5, 6], 3)

        >>> view = concat([1], itertools.count())
        >>> view.end()  # EndMarker, never reached
    """
    from lazyconcat import _RESOLUTION_MODE

    mode = mode or _RESOLUTION_MODE

    validate_arguments(sources, element_type, convert, mode)

    logger.debug(f"Concatenating {len(sources)} source(s)...")

    slots = [source if isinstance(source, Slot) else Slot(source) for source in sources]
    adapters = [adapt(slot, i) for i, slot in enumerate(slots)]

    for i, adapter in enumerate(adapters):
        logger.debug(
            f"  Slot {i}: {adapter.name} ({adapter.capability.name}, "
            f"{slots[i].ownership.value}, sized={adapter.sized})"
        )

    reference = resolve_common_reference(
        adapters, element_type=element_type, convert=convert, mode=mode
    )

    capability = joint_capability(adapters)
    sized = all(adapter.sized for adapter in adapters)
    cls = view_class(capability, sized)

    view = cls(adapters, reference)
    logger.debug(
        f"Built {cls.__name__} (capability={capability.name}, sized={sized}, "
        f"end={'cursor' if view.is_common else 'marker'})"
    )
    return view
