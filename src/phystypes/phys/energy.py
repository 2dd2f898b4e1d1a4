"""Energy, stored in joules."""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity

Energy = Quantity("phys.Energy.name", families.ENERGY, "phys.Energy.Joule.sym")

JOULES = Energy.si_units
KILOJOULES = Energy.define_units("phys.Energy.Kilojoule.sym", scaled(1e3))
KILOWATT_HOURS = Energy.define_units("phys.Energy.KilowattHour.sym", scaled(3.6e6))
