"""Standard physical quantities and the process-wide default registry.

Importing this package declares the standard quantities but registers
nothing. Registration happens explicitly, in :data:`STANDARD_QUANTITIES`
order, through :func:`install_standard_quantities`. :func:`default_registry`
builds the shared registry on first use behind a once-only gate; after that
it is only read.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional, Tuple

from ..config import Settings, load_settings
from ..core.catalog import load_unit_catalog
from ..core.quantity import Quantity
from ..core.registry import FamilyRegistry
from .acceleration import Acceleration
from .amount import Amount
from .area import Area
from .charge import Charge
from .current import Current
from .dimensionless import Dimensionless
from .energy import Energy
from .force import Force
from .frequency import Frequency
from .length import Length
from .luminous import LuminousIntensity
from .mass import Mass
from .power import Power
from .temperature import Temperature
from .time import Time
from .velocity import Velocity
from .voltage import Voltage
from .volume import Volume

logger = logging.getLogger(__name__)

STANDARD_QUANTITIES: Tuple[Quantity, ...] = (
    Dimensionless,
    Length,
    Mass,
    Time,
    Current,
    Temperature,
    Amount,
    LuminousIntensity,
    Area,
    Volume,
    Velocity,
    Acceleration,
    Frequency,
    Force,
    Energy,
    Power,
    Charge,
    Voltage,
)

_default: Optional[FamilyRegistry] = None
_default_lock = threading.Lock()


def install_standard_quantities(registry: FamilyRegistry) -> FamilyRegistry:
    """Register every standard quantity with ``registry``; safe to repeat."""
    for quantity in STANDARD_QUANTITIES:
        registry.register(quantity)
    return registry


def build_registry(settings: Optional[Settings] = None) -> FamilyRegistry:
    """Create a registry holding the standard quantities plus any configured catalogue."""
    settings = settings or load_settings()
    registry = install_standard_quantities(FamilyRegistry())
    if settings.units_file is not None:
        load_unit_catalog(settings.units_file, registry)
    return registry


def default_registry() -> FamilyRegistry:
    """Return the shared registry, building it on first call."""
    global _default

    registry = _default
    if registry is not None:
        return registry
    with _default_lock:
        if _default is None:
            _default = build_registry()
            logger.debug("Default registry initialised with %d quantities", len(_default))
        return _default


__all__ = [
    "STANDARD_QUANTITIES",
    "install_standard_quantities",
    "build_registry",
    "default_registry",
    "Acceleration",
    "Amount",
    "Area",
    "Charge",
    "Current",
    "Dimensionless",
    "Energy",
    "Force",
    "Frequency",
    "Length",
    "LuminousIntensity",
    "Mass",
    "Power",
    "Temperature",
    "Time",
    "Velocity",
    "Voltage",
    "Volume",
]
