"""Force, stored in newtons."""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity

Force = Quantity("phys.Force.name", families.FORCE, "phys.Force.Newton.sym")

NEWTONS = Force.si_units
KILONEWTONS = Force.define_units("phys.Force.Kilonewton.sym", scaled(1e3))
POUNDS_FORCE = Force.define_units("phys.Force.PoundForce.sym", scaled(4.4482216152605))
