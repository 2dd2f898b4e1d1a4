"""Length, stored in metres. Lengths are never negative."""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import scaled
from ..core.quantity import Quantity
from ..core.restrictions import NON_NEGATIVE

Length = Quantity(
    "phys.Length.name",
    families.LENGTH,
    "phys.Length.Meter.sym",
    restriction=NON_NEGATIVE,
)

METERS = Length.si_units
MILLIMETERS = Length.define_units("phys.Length.Millimeter.sym", scaled(1e-3))
CENTIMETERS = Length.define_units("phys.Length.Centimeter.sym", scaled(1e-2))
KILOMETERS = Length.define_units("phys.Length.Kilometer.sym", scaled(1e3))
# Imperial lengths, exact by international agreement (1959).
INCHES = Length.define_units("phys.Length.Inch.sym", scaled(0.0254))
FEET = Length.define_units("phys.Length.Foot.sym", scaled(0.3048))
YARDS = Length.define_units("phys.Length.Yard.sym", scaled(0.9144))
MILES = Length.define_units("phys.Length.Mile.sym", scaled(1609.344))
