"""Power, stored in watts."""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity

Power = Quantity("phys.Power.name", families.POWER, "phys.Power.Watt.sym")

WATTS = Power.si_units
KILOWATTS = Power.define_units("phys.Power.Kilowatt.sym", scaled(1e3))
