import importlib.metadata as _metadata
import os

from lazyconcat._capability import Capability, Ownership, ReferenceKind
from lazyconcat._constants import (
    AVAILABLE_RESOLUTION_MODES,
    DEFAULT_RESOLUTION_MODE,
    RESOLUTION_MODE_ENV_VAR,
    ResolutionMode,
)
from lazyconcat._exceptions import (
    ConcatAdapterError,
    ConcatArityError,
    ConcatCapabilityError,
    ConcatError,
    ConcatResolutionError,
    ConcatTypeError,
)
from lazyconcat._logging import disable_logging, setup_basic_logging, verbose_to_level
from lazyconcat.concat import (
    CommonReference,
    ConcatView,
    EndMarker,
    RandomAccessConcatView,
    concat,
)
from lazyconcat.slots import Slot, get_available_adapters, register_adapter

__version__ = _metadata.version("lazyconcat")

# Global resolution mode configuration
_RESOLUTION_MODE: ResolutionMode = os.environ.get(  # type: ignore[assignment]
    RESOLUTION_MODE_ENV_VAR, DEFAULT_RESOLUTION_MODE
)


def use(mode: str):
    """
    Set the global element-type resolution mode for all future concat() calls.

    Available modes:
        - 'numeric': Class hierarchy, then the numbers tower (default)
        - 'strict': Class hierarchy only

    Args:
        mode: Mode name to use

    Raises:
        ConcatResolutionError: If mode is unknown

    Warning - Thread Safety:
        This function modifies a global variable and is NOT thread-safe.
        Pass the mode explicitly to bypass the global:
            lazyconcat.concat(a, b, mode='strict')

    Examples:
        >>> import lazyconcat
        >>>
        >>> lazyconcat.concat(range(3), np.array([2.5])).element_type
        <class 'numbers.Real'>
        >>>
        >>> lazyconcat.use('strict')
        >>> lazyconcat.concat(range(3), np.array([2.5]))  # raises ConcatResolutionError
    """
    global _RESOLUTION_MODE

    if mode not in AVAILABLE_RESOLUTION_MODES:
        raise ConcatResolutionError(
            f"Unknown resolution mode: '{mode}'\n"
            f"Available modes: {AVAILABLE_RESOLUTION_MODES}"
        )

    _RESOLUTION_MODE = mode  # type: ignore[assignment]


def get_mode() -> ResolutionMode:
    """
    Get the current global resolution mode.

    Example:
        >>> import lazyconcat
        >>> lazyconcat.get_mode()
        'numeric'
    """
    return _RESOLUTION_MODE


def verbose(level=True):
    """
    Enable/disable verbose logging for lazyconcat operations.

    Args:
        level: Logging level to enable:
            - True or "info": Show INFO and above (default)
            - "debug": Show DEBUG and above (slot adapters, resolution,
              chosen view class)
            - False: Disable all logging

    Example:
        >>> import lazyconcat
        >>> lazyconcat.verbose("debug")
        >>> view = lazyconcat.concat([1, 2], range(3))
        DEBUG [lazyconcat.concat._orchestrator] Concatenating 2 source(s)...
    """
    log_level = verbose_to_level(level)
    if log_level is None:
        disable_logging()
    else:
        setup_basic_logging(level=log_level)


__all__ = [
    "Capability",
    "CommonReference",
    "ConcatAdapterError",
    "ConcatArityError",
    "ConcatCapabilityError",
    "ConcatError",
    "ConcatResolutionError",
    "ConcatTypeError",
    "ConcatView",
    "EndMarker",
    "Ownership",
    "RandomAccessConcatView",
    "ReferenceKind",
    "Slot",
    "concat",
    "get_available_adapters",
    "get_mode",
    "register_adapter",
    "use",
    "verbose",
]
