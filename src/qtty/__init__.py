"""
qtty: strongly-typed physical quantities for Python.

A `Quantity` is one float tagged with a `Unit`. Conversions are checked
against the unit's dimension before any arithmetic runs, rates are composed
with `Per` (``Kilometers(10) / Seconds(2)`` is in ``Km/sec``), and angular
quantities add trigonometry and exact range wrapping.

The unit registry namespace ``u`` is created lazily on first access.
"""

import logging
from importlib import metadata as _metadata
from pathlib import Path as _Path

__author__ = "qtty developers"
__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("qtty")
except _metadata.PackageNotFoundError:
    import tomllib
    # src/qtty/__init__.py -> repository root
    try:
        with open(_Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except FileNotFoundError:
        __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from typing import TYPE_CHECKING, Any

from qtty.core.dimensions import (
    ANGULAR,
    DIMENSIONLESS,
    FREQUENCY,
    LENGTH,
    MASS,
    POWER,
    TIME,
    VELOCITY,
    Dimension,
    DivDim,
)
from qtty.core.errors import (
    IncompatibleDimensionError,
    InvalidValueError,
    QttyError,
    SimplificationError,
    UnitMismatchError,
    UnknownUnitError,
)
from qtty.core.quantity import NAN, Quantity
from qtty.core.unit import Per, Unit, Unitless, define_unit
from qtty.units.angular import AngularQuantity, from_dms, from_dms_sign, from_hms

# Public names exposed by the package. Keep this minimal and stable.
__all__ = [
    "__version__", "__author__", "__license__",
    "Dimension", "DivDim",
    "LENGTH", "TIME", "MASS", "POWER", "ANGULAR", "DIMENSIONLESS", "VELOCITY", "FREQUENCY",
    "Unit", "Per", "Unitless", "define_unit",
    "Quantity", "AngularQuantity", "NAN",
    "from_dms", "from_dms_sign", "from_hms",
    "QttyError", "IncompatibleDimensionError", "UnitMismatchError", "SimplificationError",
    "UnknownUnitError", "InvalidValueError",
]

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from qtty.units.registry import UnitsRegistry
# Lazy access helpers -------------------------------------------------------

def _get_default_registry() -> "UnitsRegistry":
    # Import here to avoid import-time side-effects / circular imports.
    from qtty.units.registry import DEFAULT_REGISTRY  # local import
    return DEFAULT_REGISTRY

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'u' will construct a namespace from the
    package's default registry on first use.
    """
    if name == "u":
        return _get_default_registry().as_namespace()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["u"])
