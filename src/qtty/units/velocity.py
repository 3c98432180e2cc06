"""
qtty.units.velocity
===================

Velocity units: length per time, all built from `Per`.
"""

from qtty.core.dimensions import VELOCITY
from qtty.core.unit import Per
from qtty.units.length import AstronomicalUnit, Kilometer, Meter
from qtty.units.time import Day, Hour, Second

Velocity = VELOCITY

MeterPerSecond     = Per(Meter, Second)
KilometerPerSecond = Per(Kilometer, Second)
MeterPerHour       = Per(Meter, Hour)
KilometerPerHour   = Per(Kilometer, Hour)
MeterPerDay        = Per(Meter, Day)
KilometerPerDay    = Per(Kilometer, Day)
AuPerSecond        = Per(AstronomicalUnit, Second)
AuPerHour          = Per(AstronomicalUnit, Hour)
AuPerDay           = Per(AstronomicalUnit, Day)

MetersPerSecond     = MeterPerSecond
KilometersPerSecond = KilometerPerSecond
MetersPerHour       = MeterPerHour
KilometersPerHour   = KilometerPerHour
MetersPerDay        = MeterPerDay
KilometersPerDay    = KilometerPerDay
AusPerSecond        = AuPerSecond
AusPerHour          = AuPerHour
AusPerDay           = AuPerDay

UNITS = (
    MeterPerSecond, KilometerPerSecond, MeterPerHour, KilometerPerHour,
    MeterPerDay, KilometerPerDay, AuPerSecond, AuPerHour, AuPerDay,
)

__all__ = [
    "Velocity",
    "MeterPerSecond", "KilometerPerSecond", "MeterPerHour", "KilometerPerHour",
    "MeterPerDay", "KilometerPerDay", "AuPerSecond", "AuPerHour", "AuPerDay",
    "MetersPerSecond", "KilometersPerSecond", "MetersPerHour", "KilometersPerHour",
    "MetersPerDay", "KilometersPerDay", "AusPerSecond", "AusPerHour", "AusPerDay",
]
