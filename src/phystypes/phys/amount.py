"""Amount of substance, stored in moles."""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity
from ..core.restrictions import NON_NEGATIVE

Amount = Quantity(
    "phys.Amount.name",
    families.AMOUNT,
    "phys.Amount.Mole.sym",
    restriction=NON_NEGATIVE,
)

MOLES = Amount.si_units
MILLIMOLES = Amount.define_units("phys.Amount.Millimole.sym", scaled(1e-3))
