"""
Slot adapter registry and factory.

Provides centralized adapter registration and wraps every source handed to
concat() in the first adapter that accepts it. The view only ever talks to
adapters, so it stays agnostic of what the sources are.
"""

from lazyconcat._constants import OPTIONAL_ADAPTERS
from lazyconcat._exceptions import ConcatAdapterError, ConcatTypeError
from lazyconcat._logging import get_logger

# Re-export base classes for type hints and isinstance checks
from lazyconcat.slots.base import IndexedAdapter, Slot, SlotAdapter, WalkAdapter
from lazyconcat.slots.iterator import UnboundedAdapter

logger = get_logger(__name__)

# Adapter registry, in lookup order (most specific first)
_ADAPTERS: list[type[SlotAdapter]] = []


def register_adapter(adapter_cls: type[SlotAdapter], first: bool = True) -> None:
    """
    Register a slot adapter.

    Args:
        adapter_cls: SlotAdapter subclass with a unique `name`
        first: Look it up before every registered adapter (default).
            The built-in fallbacks accept almost any iterable, so custom
            adapters registered last would never be reached.

    Raises:
        ConcatAdapterError: If an adapter with the same name is registered

    Example:
        class TensorAdapter(IndexedAdapter):
            name = "torch"
            ...

        register_adapter(TensorAdapter)
    """
    if adapter_cls.name in get_available_adapters():
        raise ConcatAdapterError(f"Adapter '{adapter_cls.name}' is already registered")

    if first:
        _ADAPTERS.insert(0, adapter_cls)
    else:
        _ADAPTERS.append(adapter_cls)


def unregister_adapter(name: str) -> None:
    """Remove a registered adapter by name (no-op if absent)."""
    _ADAPTERS[:] = [cls for cls in _ADAPTERS if cls.name != name]


def adapt(slot: Slot, slot_index: int = 0) -> SlotAdapter:
    """
    Wrap a Slot in the first adapter that accepts its source.

    Args:
        slot: Slot to adapt
        slot_index: Slot position in the view, only used in error messages

    Returns:
        SlotAdapter instance for the slot

    Raises:
        ConcatTypeError: If no adapter accepts the source
    """
    if slot.unbounded:
        return UnboundedAdapter(slot)

    for adapter_cls in _ADAPTERS:
        if adapter_cls.accepts(slot.source):
            return adapter_cls(slot)

    raise ConcatTypeError(
        f"Slot {slot_index} is not a traversable sequence: "
        f"{type(slot.source).__name__}\n"
        f"Registered adapters: {get_available_adapters()}\n"
        f"\n"
        f"Sources must be iterable (list, tuple, range, dict, set, generator, "
        f"pyarrow/numpy arrays, ...)"
    )


def get_available_adapters() -> list[str]:
    """
    Get names of currently registered adapters, in lookup order.

    Returns:
        List of adapter names
    """
    return [cls.name for cls in _ADAPTERS]


def _register_all_adapters() -> None:
    """Register all available adapters on module import."""
    # Columnar (pyarrow and numpy always available)
    from lazyconcat.slots.numpy import NumpyAdapter
    from lazyconcat.slots.pyarrow import ArrowAdapter

    register_adapter(ArrowAdapter, first=False)
    register_adapter(NumpyAdapter, first=False)

    # Pandas (optional)
    from lazyconcat.slots.pandas import HAS_PANDAS, PandasAdapter

    if HAS_PANDAS:
        register_adapter(PandasAdapter, first=False)

    # Polars (optional)
    from lazyconcat.slots.polars import HAS_POLARS, PolarsAdapter

    if HAS_POLARS:
        register_adapter(PolarsAdapter, first=False)

    # Python builtins, generic fallbacks last
    from lazyconcat.slots.iterable import IterableAdapter, ReversibleAdapter
    from lazyconcat.slots.iterator import IteratorAdapter
    from lazyconcat.slots.nested import NestedViewAdapter
    from lazyconcat.slots.sequence import SequenceAdapter

    register_adapter(NestedViewAdapter, first=False)
    register_adapter(UnboundedAdapter, first=False)
    register_adapter(IteratorAdapter, first=False)
    register_adapter(SequenceAdapter, first=False)
    register_adapter(ReversibleAdapter, first=False)
    register_adapter(IterableAdapter, first=False)

    missing = [name for name in OPTIONAL_ADAPTERS if name not in get_available_adapters()]
    if missing:
        logger.debug(f"Optional adapters unavailable (library not installed): {missing}")

    logger.debug(f"Registered slot adapters: {get_available_adapters()}")


# Auto-register on module import
_register_all_adapters()

__all__ = [
    "IndexedAdapter",
    "Slot",
    "SlotAdapter",
    "WalkAdapter",
    "adapt",
    "get_available_adapters",
    "register_adapter",
    "unregister_adapter",
]
