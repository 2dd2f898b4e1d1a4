"""Acceleration, stored in metres per second squared."""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity

Acceleration = Quantity(
    "phys.Acceleration.name",
    families.ACCELERATION,
    "phys.Acceleration.MeterPerSecondSquared.sym",
)

METERS_PER_SECOND_SQUARED = Acceleration.si_units
# Standard acceleration of gravity (CGPM 1901).
STANDARD_GRAVITIES = Acceleration.define_units("phys.Acceleration.StandardGravity.sym", scaled(9.80665))
