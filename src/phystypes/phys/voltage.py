"""Electric potential difference, stored in volts."""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity

Voltage = Quantity("phys.Voltage.name", families.VOLTAGE, "phys.Voltage.Volt.sym")

VOLTS = Voltage.si_units
MILLIVOLTS = Voltage.define_units("phys.Voltage.Millivolt.sym", scaled(1e-3))
