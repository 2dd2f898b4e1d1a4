"""Frequency, stored in hertz."""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity
from ..core.restrictions import NON_NEGATIVE

Frequency = Quantity(
    "phys.Frequency.name",
    families.FREQUENCY,
    "phys.Frequency.Hertz.sym",
    restriction=NON_NEGATIVE,
)

HERTZ = Frequency.si_units
KILOHERTZ = Frequency.define_units("phys.Frequency.Kilohertz.sym", scaled(1e3))
REVOLUTIONS_PER_MINUTE = Frequency.define_units("phys.Frequency.RevolutionPerMinute.sym", scaled(1.0 / 60.0))
