"""Volume, stored in cubic metres."""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity
from ..core.restrictions import NON_NEGATIVE

Volume = Quantity(
    "phys.Volume.name",
    families.VOLUME,
    "phys.Volume.CubicMeter.sym",
    restriction=NON_NEGATIVE,
)

CUBIC_METERS = Volume.si_units
LITERS = Volume.define_units("phys.Volume.Liter.sym", scaled(1e-3))
MILLILITERS = Volume.define_units("phys.Volume.Milliliter.sym", scaled(1e-6))
