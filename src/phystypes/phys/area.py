"""Area, stored in square metres."""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity
from ..core.restrictions import NON_NEGATIVE

Area = Quantity(
    "phys.Area.name",
    families.AREA,
    "phys.Area.SquareMeter.sym",
    restriction=NON_NEGATIVE,
)

SQUARE_METERS = Area.si_units
SQUARE_CENTIMETERS = Area.define_units("phys.Area.SquareCentimeter.sym", scaled(1e-4))
HECTARES = Area.define_units("phys.Area.Hectare.sym", scaled(1e4))
SQUARE_KILOMETERS = Area.define_units("phys.Area.SquareKilometer.sym", scaled(1e6))
