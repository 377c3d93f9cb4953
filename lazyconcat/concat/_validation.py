"""
Argument validation for concatenation.

Validates:
- Arity (at least one source)
- Explicit element type and converter
- Resolution mode
"""

from typing import Any, Optional

from lazyconcat._constants import AVAILABLE_RESOLUTION_MODES
from lazyconcat._exceptions import (
    ConcatArityError,
    ConcatResolutionError,
    ConcatTypeError,
)
from lazyconcat._logging import get_logger
from lazyconcat.concat._resolver import normalize_type

logger = get_logger(__name__)


def validate_arguments(
    sources: tuple, element_type: Any, convert: Optional[Any], mode: str
) -> None:
    """
    Run all argument validations before any source is adapted.

    Raises:
        ConcatArityError: If no source is given
        ConcatTypeError: If element_type or convert are malformed
        ConcatResolutionError: If mode is unknown
    """
    _validate_arity(sources)
    _validate_element_type(element_type, convert)
    _validate_mode(mode)
    logger.debug("All argument validations passed")


def _validate_arity(sources: tuple) -> None:
    if len(sources) < 1:
        raise ConcatArityError(
            f"Need at least 1 source to concat, got {len(sources)}"
        )


def _validate_element_type(element_type: Any, convert: Optional[Any]) -> None:
    if convert is not None and not callable(convert):
        raise ConcatTypeError(
            f"convert must be callable, got {type(convert).__name__}"
        )

    if element_type is None:
        if convert is not None:
            raise ConcatTypeError(
                "convert requires an explicit element_type.\n"
                "Example: lazyconcat.concat(a, b, element_type=float, convert=float)"
            )
        return

    if element_type is not Any and normalize_type(element_type) is Any:
        raise ConcatTypeError(
            f"element_type must be a class, a parametrized generic or typing.Any, "
            f"got {element_type!r}"
        )


def _validate_mode(mode: str) -> None:
    if mode not in AVAILABLE_RESOLUTION_MODES:
        raise ConcatResolutionError(
            f"Unknown resolution mode: '{mode}'\n"
            f"Available modes: {AVAILABLE_RESOLUTION_MODES}"
        )
