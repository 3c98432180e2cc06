# qtty.units.frequency -- angular rates (angle per time)

from qtty.core.dimensions import FREQUENCY
from qtty.core.unit import Per
from qtty.units.angular import Arcsecond, Degree, MilliArcsecond, Radian
from qtty.units.time import Day, Hour, Minute, Second, Year

Frequency = FREQUENCY

RadianPerSecond         = Per(Radian, Second)
RadianPerDay            = Per(Radian, Day)
DegreePerSecond         = Per(Degree, Second)
DegreePerMinute         = Per(Degree, Minute)
DegreePerHour           = Per(Degree, Hour)
DegreePerDay            = Per(Degree, Day)
DegreePerYear           = Per(Degree, Year)
ArcsecondPerDay         = Per(Arcsecond, Day)
ArcsecondPerYear        = Per(Arcsecond, Year)
MilliArcsecondPerDay    = Per(MilliArcsecond, Day)
MilliArcsecondPerYear   = Per(MilliArcsecond, Year)

RadiansPerSecond        = RadianPerSecond
RadiansPerDay           = RadianPerDay
DegreesPerSecond        = DegreePerSecond
DegreesPerMinute        = DegreePerMinute
DegreesPerHour          = DegreePerHour
DegreesPerDay           = DegreePerDay
DegreesPerYear          = DegreePerYear
ArcsecondsPerDay        = ArcsecondPerDay
ArcsecondsPerYear       = ArcsecondPerYear
MilliArcsecondsPerDay   = MilliArcsecondPerDay
MilliArcsecondsPerYear  = MilliArcsecondPerYear

UNITS = (
    RadianPerSecond, RadianPerDay,
    DegreePerSecond, DegreePerMinute, DegreePerHour, DegreePerDay, DegreePerYear,
    ArcsecondPerDay, ArcsecondPerYear, MilliArcsecondPerDay, MilliArcsecondPerYear,
)

__all__ = [
    "Frequency",
    "RadianPerSecond", "RadianPerDay",
    "DegreePerSecond", "DegreePerMinute", "DegreePerHour", "DegreePerDay", "DegreePerYear",
    "ArcsecondPerDay", "ArcsecondPerYear", "MilliArcsecondPerDay", "MilliArcsecondPerYear",
    "RadiansPerSecond", "RadiansPerDay",
    "DegreesPerSecond", "DegreesPerMinute", "DegreesPerHour", "DegreesPerDay", "DegreesPerYear",
    "ArcsecondsPerDay", "ArcsecondsPerYear", "MilliArcsecondsPerDay", "MilliArcsecondsPerYear",
]
