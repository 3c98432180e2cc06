"""
qtty.units.time
===============

Time units. The canonical unit is the day, so one second is ``1/86400``.
"""

from qtty.core.dimensions import TIME
from qtty.core.unit import define_unit

Millisecond   = define_unit("Millisecond", "ms", TIME, 1.0 / (24.0 * 3600.0 * 1000.0))
Second        = define_unit("Second", "sec", TIME, 1.0 / (24.0 * 3600.0))
Minute        = define_unit("Minute", "min", TIME, 1.0 / (24.0 * 60.0))
Hour          = define_unit("Hour", "h", TIME, 1.0 / 24.0)
Day           = define_unit("Day", "d", TIME, 1.0)
Week          = define_unit("Week", "wk", TIME, 7.0)
Year          = define_unit("Year", "yr", TIME, 365.2425)       # Gregorian mean
Century       = define_unit("Century", "cent", TIME, 36_524.25)
JulianYear    = define_unit("JulianYear", "JY", TIME, 365.25)
JulianCentury = define_unit("JulianCentury", "JC", TIME, 36_525.0)

Milliseconds    = Millisecond
Seconds         = Second
Minutes         = Minute
Hours           = Hour
Days            = Day
Weeks           = Week
Years           = Year
Centuries       = Century
JulianYears     = JulianYear
JulianCenturies = JulianCentury

MILLISEC       = Milliseconds(1.0)
SEC            = Seconds(1.0)
MIN            = Minutes(1.0)
HOUR           = Hours(1.0)
DAY            = Days(1.0)
WEEK           = Weeks(1.0)
YEAR           = Years(1.0)
CENTURY        = Centuries(1.0)
JULIAN_YEAR    = JulianYears(1.0)
JULIAN_CENTURY = JulianCenturies(1.0)

UNITS = (
    Millisecond, Second, Minute, Hour, Day, Week, Year, Century, JulianYear, JulianCentury,
)

__all__ = [
    "Millisecond", "Second", "Minute", "Hour", "Day", "Week", "Year", "Century",
    "JulianYear", "JulianCentury",
    "Milliseconds", "Seconds", "Minutes", "Hours", "Days", "Weeks", "Years", "Centuries",
    "JulianYears", "JulianCenturies",
    "MILLISEC", "SEC", "MIN", "HOUR", "DAY", "WEEK", "YEAR", "CENTURY",
    "JULIAN_YEAR", "JULIAN_CENTURY",
]
