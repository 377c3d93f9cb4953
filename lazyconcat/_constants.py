"""
Global constants for lazyconcat.

Organized by: Resolution Mode, Adapters, Numeric Tower, Logging.
"""

import numbers
from typing import Literal

# Resolution Mode Configuration
ResolutionMode = Literal["numeric", "strict"]
"""Valid common-element resolution modes."""

DEFAULT_RESOLUTION_MODE: ResolutionMode = "numeric"
"""Default resolution mode used by concat()."""

AVAILABLE_RESOLUTION_MODES: tuple[ResolutionMode, ...] = ("numeric", "strict")
"""
All supported resolution modes.

- numeric: class hierarchy first, then the numbers tower (int + float -> Real)
- strict: class hierarchy only (int + float fails)
"""

RESOLUTION_MODE_ENV_VAR = "LAZYCONCAT_RESOLUTION_MODE"
"""Environment variable that seeds the global resolution mode at import."""


# Slot Adapters
OPTIONAL_ADAPTERS: tuple[str, ...] = ("pandas", "polars")
"""Adapters whose library is an optional extra (registered only if importable)."""

PRODUCED_SEQUENCE_TYPES = (range, str, bytes, bytearray, memoryview)
"""
Sequence types whose items are computed on access.

Indexing these yields a fresh object rather than one stored in the
container, so slots over them dereference as PRODUCED.
"""

UNBOUNDED_ITERATOR_TYPE_NAMES = frozenset({"itertools.count"})
"""Iterator types whose end is statically unreachable."""

UNHINTED_UNBOUNDED_TYPE_NAMES = frozenset({"itertools.repeat"})
"""
Iterator types that are unbounded exactly when they give no length hint.

repeat(x) is endless, repeat(x, n) is not. itertools.cycle is absent:
cycle([]) ends at once, and only pulling an item can tell.
"""


# Numeric Tower
NUMERIC_TOWER: tuple[type, ...] = (
    numbers.Integral,
    numbers.Rational,
    numbers.Real,
    numbers.Complex,
    numbers.Number,
)
"""
Fallback common types searched in 'numeric' mode, narrowest first.

numpy scalar types register themselves here too, so np.int64 + int
resolves to numbers.Integral.
"""


# Logging
LOGGER_NAMESPACE = "lazyconcat"
"""Root logger name; every module logger lives below it."""

DEFAULT_LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
"""Format used by setup_basic_logging()."""


# Repr
REPR_MAX_SLOTS = 6
"""Maximum number of slots listed in a view's repr before eliding."""
