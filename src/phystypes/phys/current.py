"""Electric current.

Current values are stored internally in amperes, the SI unit of electric
current. Current is non-negative: direction is a property of the circuit,
not of the measure, so constructing a current below zero fails.
"""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity
from ..core.restrictions import NON_NEGATIVE

Current = Quantity(
    "phys.Current.name",
    families.CURRENT,
    "phys.Current.Ampere.sym",
    restriction=NON_NEGATIVE,
)

#: Amperes, the SI units used to store current internally.
AMPERES = Current.si_units
MILLIAMPERES = Current.define_units("phys.Current.Milliampere.sym", scaled(1e-3))
KILOAMPERES = Current.define_units("phys.Current.Kiloampere.sym", scaled(1e3))
