"""Electric charge, stored in coulombs.

Charge is signed. Multiplying a :mod:`current <phystypes.phys.current>` by a
time resolves to this quantity.
"""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity

Charge = Quantity("phys.Charge.name", families.CHARGE, "phys.Charge.Coulomb.sym")

COULOMBS = Charge.si_units
MILLIAMPERE_HOURS = Charge.define_units("phys.Charge.MilliampereHour.sym", scaled(3.6))
