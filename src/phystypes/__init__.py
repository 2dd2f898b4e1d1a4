"""phystypes: immutable physical quantity types with dimensional checking.

Typical use::

    from phystypes.phys import Current, Time
    from phystypes.phys.current import MILLIAMPERES

    drawn = Current(250.0, MILLIAMPERES)
    charge = drawn * Time.of(3600.0)      # resolves to Charge
"""

from __future__ import annotations

from .core import (
    DimensionalError,
    DomainError,
    Family,
    FamilyRegistry,
    Measure,
    PhysTypesError,
    Quantity,
    RegistrationError,
    UnresolvedFamilyError,
    Units,
)

__version__ = "0.1.0"

__all__ = [
    "DimensionalError",
    "DomainError",
    "Family",
    "FamilyRegistry",
    "Measure",
    "PhysTypesError",
    "Quantity",
    "RegistrationError",
    "UnresolvedFamilyError",
    "Units",
]
