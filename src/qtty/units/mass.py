# qtty.units.mass -- canonical unit is the gram

from qtty.core.dimensions import MASS
from qtty.core.unit import define_unit

Gram      = define_unit("Gram", "g", MASS, 1.0)
Kilogram  = define_unit("Kilogram", "Kg", MASS, 1_000.0)
SolarMass = define_unit("SolarMass", "M☉", MASS, 1.988_47e33)

Kg = Kilogram

Grams       = Gram
Kilograms   = Kilogram
SolarMasses = SolarMass

KG = Kilograms(1.0)

UNITS = (Gram, Kilogram, SolarMass)

__all__ = [
    "Gram", "Kilogram", "SolarMass", "Kg",
    "Grams", "Kilograms", "SolarMasses",
    "KG",
]
