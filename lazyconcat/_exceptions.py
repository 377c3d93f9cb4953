"""
Exception hierarchy for lazyconcat.

All lazyconcat-specific exceptions inherit from ConcatError.
Every one of them is raised while a view is being constructed, never while
it is being traversed.

Usage:
    from lazyconcat._exceptions import ConcatError, ConcatResolutionError

    try:
        view = lazyconcat.concat(names, scores)
    except ConcatResolutionError:
        # Element types have nothing in common
        view = lazyconcat.concat(names, scores, element_type=object)
    except ConcatError:
        # Catch-all for other concat errors
        raise
"""


class ConcatError(Exception):
    """Base exception for all lazyconcat errors."""

    pass


class ConcatArityError(ConcatError):
    """
    Wrong number of sources.

    Raised when:
    - concat() is called without any source

    Examples:
        - "Need at least 1 source to concat, got 0"
    """

    pass


class ConcatTypeError(ConcatError, TypeError):
    """
    Source is not a traversable sequence.

    Raised when:
    - No registered slot adapter accepts the source (ints, None, ...)
    - Slot() receives an invalid ownership value
    - An explicit element_type is not a type

    Examples:
        - "Slot 1 is not a traversable sequence: int"
        - "Invalid ownership: 'shared'. Use 'owned' or 'borrowed'"
    """

    pass


class ConcatResolutionError(ConcatError):
    """
    No common reference type for the slots' elements.

    Raised when:
    - Element types belong to unrelated class hierarchies
    - A slot's element type is not a subclass of an explicit element_type
      and no convert callable was given
    - Resolution mode is unknown

    Examples:
        - "No common element type for slots: int, Foo"
        - "Slot 2 element type str is not a subclass of bytes"
    """

    pass


class ConcatCapabilityError(ConcatError):
    """
    Requested traversal capability exceeds the joint capability.

    Raised when:
    - view.require() asks for more than the weakest slot supports

    Examples:
        - "View is FORWARD, RANDOM_ACCESS required (slot 1 'iterable' is FORWARD)"
    """

    pass


class ConcatAdapterError(ConcatError):
    """
    Slot adapter error.

    Raised when:
    - An optional adapter's library is missing
    - An adapter is registered twice

    Examples:
        - "polars adapter requires polars package. Install with: pip install polars"
    """

    pass
