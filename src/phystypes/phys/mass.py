"""Mass, stored in kilograms."""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity
from ..core.restrictions import NON_NEGATIVE

Mass = Quantity(
    "phys.Mass.name",
    families.MASS,
    "phys.Mass.Kilogram.sym",
    restriction=NON_NEGATIVE,
)

KILOGRAMS = Mass.si_units
GRAMS = Mass.define_units("phys.Mass.Gram.sym", scaled(1e-3))
TONNES = Mass.define_units("phys.Mass.Tonne.sym", scaled(1e3))
POUNDS = Mass.define_units("phys.Mass.Pound.sym", scaled(0.45359237))
