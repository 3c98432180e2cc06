"""
qtty.units.registry
===================

Symbol registry for qtty units.

- Encapsulates lookup state in a `UnitsRegistry` class (thread-safe).
- Data-driven registration of the unit catalog.
- Normalization to Unicode NFC so "M☉" typed in any composed form resolves.
- Aliases: unit names, plural constructor names and case-folded spellings
  ("Kilometer", "Kilometers", "km" -> "Km").
- Composite expressions ("Km/sec", "m/(m/sec)") are handed to the parser.
- Clear public API: `register`, `register_alias`, `get`, `has`, `all`.
- Easily testable (build as many registries as needed).
"""
from __future__ import annotations

import logging
import threading
import unicodedata
from typing import ClassVar, Dict, Iterable, Mapping

from qtty.core.errors import UnknownUnitError
from qtty.core.unit import Unit, define_unit
from qtty.units import angular, length, mass, power, time
from qtty.units.parser import extract_unit_expr

logger = logging.getLogger(__name__)

_EXPR_CHARS = ("/", "(", ")", "*", "^")


def normalize_symbol(s: str) -> str:
    """Normalize user-provided unit symbols.

    Rules:
    - Strip surrounding whitespace.
    - Unicode normalize to NFC.
    - Leave case as-is; case-insensitive matches come from folded aliases.
    """
    if not s:
        return s
    return unicodedata.normalize("NFC", s.strip())


# ---------------------------------------------------------------------------
# Units registry
# ---------------------------------------------------------------------------
class UnitsRegistry:
    """Thread-safe registry of `Unit` objects keyed by their symbol."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._units: Dict[str, Unit] = {}
        self._aliases: Dict[str, str] = {}

    def __contains__(self, symbol: str) -> bool:
        return self.has(symbol)

    # -------------------------- public API ---------------------------------
    def register(self, unit: Unit, replace: bool = False) -> None:
        """Register (or overwrite if replace is True) a `Unit` under its symbol.

        Use `register_alias` to add additional spellings without duplication.
        """
        key = normalize_symbol(unit.symbol)
        if not key:
            raise ValueError(f"Cannot register unit '{unit.name}': empty symbol")

        # check-and-set under one lock
        with self._lock:
            if key in UnitNamespace._reserved_names:
                raise ValueError(
                    f"Cannot register unit '{key}': "
                    "name conflicts with UnitNamespace attribute/method."
                )

            if not replace:
                if key in self._units:
                    raise ValueError(
                        f"Cannot register unit '{key}': "
                        "a unit with this symbol already exists."
                    )
                if key in self._aliases:
                    raise ValueError(
                        f"Cannot register unit '{key}': "
                        "an alias with this name already exists."
                    )

            self._units[key] = unit
        logger.debug("registered unit %s as %r", unit.name, key)

    def register_alias(self, alias: str, canonical: str, replace: bool = False) -> None:
        # literal (NFC/trimmed) spelling and its case-folded form
        literal_key = normalize_symbol(alias)
        folded_key = literal_key.casefold()

        with self._lock:
            if canonical not in self._units:
                raise UnknownUnitError(f"Cannot alias '{alias}': unknown unit '{canonical}'")

            reserved = UnitNamespace._reserved_names
            if literal_key in reserved or folded_key in reserved:
                raise ValueError(
                    f"Cannot register alias '{alias}': "
                    "name conflicts with UnitNamespace attribute/method."
                )

            if not replace:
                for key in {literal_key, folded_key}:
                    # an alias may not shadow a different unit
                    if key in self._units and key != canonical:
                        raise ValueError(
                            f"Cannot register alias '{alias}' (which maps to '{key}'): "
                            f"a unit with the symbol '{key}' already exists."
                        )
                    existing = self._aliases.get(key)
                    if existing is not None and existing != canonical:
                        raise ValueError(
                            f"Cannot register alias '{alias}': "
                            f"'{key}' already refers to '{existing}'."
                        )

            for key in {literal_key, folded_key}:
                if key != canonical:
                    self._aliases[key] = canonical

    def has(self, symbol: str) -> bool:
        try:
            self.get(symbol)
            return True
        except ValueError:
            return False

    def get(self, symbol: str) -> Unit:
        """Lookup a unit by symbol, alias, or composite expression.

        Raises `UnknownUnitError` (a `ValueError`) if unknown.
        """
        if any(op in symbol for op in _EXPR_CHARS):
            return extract_unit_expr(symbol, self)

        sym = normalize_symbol(symbol)
        with self._lock:
            target = self._aliases.get(sym)
            if target is None and sym not in self._units:
                target = self._aliases.get(sym.casefold())
            if target is not None:
                sym = target

            u = self._units.get(sym)
            if u is not None:
                return u

        raise UnknownUnitError(f"Unknown unit symbol: {symbol}")

    def all(self) -> Mapping[str, Unit]:
        with self._lock:
            return dict(self._units)

    def aliases(self) -> Mapping[str, str]:
        with self._lock:
            return dict(self._aliases)

    def as_namespace(self) -> UnitNamespace:
        return UnitNamespace(self)


class UnitNamespace:
    _reserved_names: ClassVar[set[str]] = set()

    def __init__(self, reg: "UnitsRegistry") -> None:
        self._reg = reg

    def __contains__(self, spec: str) -> bool:
        return self._reg.has(spec)

    def define(self, expr: str, scale: "float|int", reference: "Unit", replace: bool = False) -> Unit:
        """Register ``expr`` as ``scale`` times ``reference`` and return the new unit."""
        if expr in UnitNamespace._reserved_names:
            raise ValueError(
                f"Cannot define unit '{expr}': "
                "name conflicts with UnitNamespace attribute/method."
            )

        unit = define_unit(expr, expr, reference.dim, float(scale) * reference.ratio)
        self._reg.register(unit, replace)
        return unit

    def __call__(self, spec: "str") -> "Unit":
        return self._reg.get(spec)

    def __getattr__(self, name: "str") -> "Unit":
        try:
            return self._reg.get(name)
        except ValueError as e:
            # Unknown symbol should look like a missing attribute
            raise AttributeError(name) from e

    def __dir__(self) -> list[str]:
        """List all available unit symbols for autocomplete."""
        base_dir = set(super().__dir__())
        units = set(self._reg.all().keys())
        aliases = set(self._reg.aliases().keys())
        return sorted(base_dir | units | aliases)

UnitNamespace._reserved_names = set(dir(UnitNamespace))


# ---------------------------------------------------------------------------
# Bootstrap a default registry from the catalog
# ---------------------------------------------------------------------------

# Plural constructor names that are not simply "<Name>s"
_IRREGULAR_PLURALS = {
    "SolarRadius": "SolarRadiuses",
    "Century": "Centuries",
    "JulianCentury": "JulianCenturies",
    "SolarMass": "SolarMasses",
    "SolarLuminosity": "SolarLuminosities",
}

_EXTRA_ALIASES = (
    ("s", "sec"),
    ("second", "sec"),
    ("hr", "h"),
    ("pc", "ps"),
    ("AU", "Au"),
    ("Msun", "M☉"),
    ("Lsun", "L☉"),
)


def _catalog() -> Iterable[Unit]:
    for module in (length, time, mass, power, angular):
        yield from module.UNITS


def _bootstrap_default_registry() -> UnitsRegistry:
    reg = UnitsRegistry()

    units = tuple(_catalog())
    for unit in units:
        reg.register(unit)

    for unit in units:
        plural = _IRREGULAR_PLURALS.get(unit.name, f"{unit.name}s")
        for alias in (unit.name, plural):
            reg.register_alias(alias, unit.symbol)
        # case-insensitive symbol, e.g. "km" or "deg"
        reg.register_alias(unit.symbol, unit.symbol)

    for alias, canonical in _EXTRA_ALIASES:
        reg.register_alias(alias, canonical)

    logger.debug("bootstrapped default registry with %d units", len(units))
    return reg


# Public, shared default registry
DEFAULT_REGISTRY: UnitsRegistry = _bootstrap_default_registry()


__all__ = [
    "UnitsRegistry",
    "UnitNamespace",
    "DEFAULT_REGISTRY",
    "normalize_symbol",
]
