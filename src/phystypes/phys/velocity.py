"""Velocity, stored in metres per second. Velocities are signed."""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity

Velocity = Quantity("phys.Velocity.name", families.VELOCITY, "phys.Velocity.MeterPerSecond.sym")

METERS_PER_SECOND = Velocity.si_units
KILOMETERS_PER_HOUR = Velocity.define_units("phys.Velocity.KilometerPerHour.sym", scaled(1.0 / 3.6))
MILES_PER_HOUR = Velocity.define_units("phys.Velocity.MilePerHour.sym", scaled(0.44704))
