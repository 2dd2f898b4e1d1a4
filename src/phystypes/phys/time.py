"""Time, stored in seconds.

Time measures are unrestricted so that they can express both durations and
signed offsets between two instants.
"""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity

Time = Quantity("phys.Time.name", families.TIME, "phys.Time.Second.sym")

SECONDS = Time.si_units
MILLISECONDS = Time.define_units("phys.Time.Millisecond.sym", scaled(1e-3))
MINUTES = Time.define_units("phys.Time.Minute.sym", scaled(60.0))
HOURS = Time.define_units("phys.Time.Hour.sym", scaled(3600.0))
DAYS = Time.define_units("phys.Time.Day.sym", scaled(86400.0))
