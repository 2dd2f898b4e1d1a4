"""Luminous intensity, stored in candelas."""

from __future__ import annotations

from ..core import dimensions as families
from ..core.quantity import Quantity
from ..core.restrictions import NON_NEGATIVE

LuminousIntensity = Quantity(
    "phys.LuminousIntensity.name",
    families.LUMINOSITY,
    "phys.LuminousIntensity.Candela.sym",
    restriction=NON_NEGATIVE,
)

CANDELAS = LuminousIntensity.si_units
