"""Thermodynamic temperature.

Temperatures are stored in kelvin and, being absolute, cannot be negative.
Celsius and Fahrenheit are affine units: they carry an offset as well as a
scale, so a temperature *difference* expressed in them must be computed on
canonical values.
"""

from __future__ import annotations

from ..core import dimensions as families
from ..core.converters import affine
from ..core.quantity import Quantity
from ..core.restrictions import NON_NEGATIVE

Temperature = Quantity(
    "phys.Temperature.name",
    families.TEMPERATURE,
    "phys.Temperature.Kelvin.sym",
    restriction=NON_NEGATIVE,
)

KELVIN = Temperature.si_units
CELSIUS = Temperature.define_units("phys.Temperature.Celsius.sym", affine(1.0, 273.15))
# K = (°F + 459.67) * 5/9
FAHRENHEIT = Temperature.define_units(
    "phys.Temperature.Fahrenheit.sym",
    affine(5.0 / 9.0, 459.67 * 5.0 / 9.0),
)
