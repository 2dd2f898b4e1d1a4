"""Dimensionless scalars (all family exponents zero)."""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity

Dimensionless = Quantity(
    "phys.Dimensionless.name",
    families.DIMENSIONLESS,
    "phys.Dimensionless.Unity.sym",
)

UNITY = Dimensionless.si_units
PERCENT = Dimensionless.define_units("phys.Dimensionless.Percent.sym", scaled(1e-2))
