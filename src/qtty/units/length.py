"""
qtty.units.length
=================

Length units. The canonical unit is the meter.
"""

from qtty.core.dimensions import LENGTH
from qtty.core.unit import define_unit

Meter            = define_unit("Meter", "m", LENGTH, 1.0)
Kilometer        = define_unit("Kilometer", "Km", LENGTH, 1_000.0)
AstronomicalUnit = define_unit("AstronomicalUnit", "Au", LENGTH, 149_597_870_000.7)
LightYear        = define_unit("LightYear", "Ly", LENGTH, 9_460_730_472_580_000.8)
SolarRadius      = define_unit("SolarRadius", "SR", LENGTH, 695_700_000.0)
# 3.26 light years
Parsec           = define_unit("Parsec", "ps", LENGTH, 3.26 * 9_460_730_472_580_000.8)

Km = Kilometer
Au = AstronomicalUnit
Ly = LightYear

# Quantity constructors: Kilometers(3.0) -> 3 Km
Meters            = Meter
Kilometers        = Kilometer
AstronomicalUnits = AstronomicalUnit
LightYears        = LightYear
SolarRadiuses     = SolarRadius
Parsecs           = Parsec

KM = Kilometers(1.0)
AU = AstronomicalUnits(1.0)
LY = LightYears(1.0)
SR = SolarRadiuses(1.0)
PS = Parsecs(1.0)

UNITS = (Meter, Kilometer, AstronomicalUnit, LightYear, SolarRadius, Parsec)

__all__ = [
    "Meter", "Kilometer", "AstronomicalUnit", "LightYear", "SolarRadius", "Parsec",
    "Km", "Au", "Ly",
    "Meters", "Kilometers", "AstronomicalUnits", "LightYears", "SolarRadiuses", "Parsecs",
    "KM", "AU", "LY", "SR", "PS",
]
