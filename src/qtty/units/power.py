# qtty.units.power -- canonical unit is the watt

from qtty.core.dimensions import POWER
from qtty.core.unit import define_unit

Watt            = define_unit("Watt", "W", POWER, 1.0)
SolarLuminosity = define_unit("SolarLuminosity", "L☉", POWER, 3.828e26)

W = Watt

Watts             = Watt
SolarLuminosities = SolarLuminosity

WATT  = Watts(1.0)
L_SUN = SolarLuminosities(1.0)

UNITS = (Watt, SolarLuminosity)

__all__ = ["Watt", "SolarLuminosity", "W", "Watts", "SolarLuminosities", "WATT", "L_SUN"]
