"""Quantity types: the factories responsible for measures of one family."""

from __future__ import annotations

import logging
import threading
from functools import lru_cache
from typing import Dict, Optional, Tuple

from .converters import SI_CONVERTER, Converter
from .dimensions import Family
from .errors import DimensionalError
from .measure import Measure
from .resources import LIB_RESOURCE, STATIC_NAMES, NameProvider
from .restrictions import UNRESTRICTED, Restriction
from .units import Units

logger = logging.getLogger(__name__)


class Quantity:
    """A physical quantity type such as electric current or length.

    A quantity declares its family, its canonical (SI) units and any further
    units, and the restriction applied to every measure it produces. Names and
    symbols are resource keys resolved through ``names``.

    Quantities are created once, when their declaring module is imported, and
    are then registered explicitly with a :class:`~phystypes.core.registry.FamilyRegistry`.
    """

    def __init__(
        self,
        name_key: str,
        family: Family,
        si_symbol_key: str,
        *,
        restriction: Restriction = UNRESTRICTED,
        names: NameProvider = LIB_RESOURCE,
        named: bool = True,
    ) -> None:
        if not isinstance(name_key, str) or not name_key:
            raise ValueError("Quantity name key must be a non-empty string")
        if not isinstance(family, Family):
            raise TypeError("family must be a Family instance")

        self.name_key = name_key
        self.family = family
        self.restriction = restriction
        self.names = names
        self.is_named = named
        self.si_units = Units(SI_CONVERTER, si_symbol_key, family, names)
        self._units: Dict[str, Units] = {si_symbol_key: self.si_units}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    @property
    def name(self) -> str:
        return self.names.lookup(self.name_key)

    @property
    def minimum(self) -> float:
        return self.restriction.minimum

    @property
    def is_non_negative(self) -> bool:
        return self.restriction.minimum == 0.0

    def define_units(
        self,
        symbol_key: str,
        converter: Converter,
        *,
        names: Optional[NameProvider] = None,
    ) -> Units:
        """Declare additional units for this quantity and return them."""
        units = Units(converter, symbol_key, self.family, names or self.names)
        with self._lock:
            existing = self._units.get(symbol_key)
            if existing is not None:
                if existing == units:
                    return existing
                raise ValueError(
                    f"Units '{symbol_key}' already defined for {self.name_key} with a different converter"
                )
            self._units = {**self._units, symbol_key: units}
        logger.debug("Defined units %s for %s", symbol_key, self.name_key)
        return units

    def all_units(self) -> Tuple[Units, ...]:
        return tuple(self._units.values())

    def units(self, symbol: str) -> Units:
        """Return units by display symbol or resource key."""
        snapshot = self._units
        if symbol in snapshot:
            return snapshot[symbol]
        for units in snapshot.values():
            if units.symbol == symbol:
                return units
        raise KeyError(f"{self.name_key} has no units '{symbol}'")

    # -- Measure construction --------------------------------------------
    def of(self, value: float) -> Measure:
        """Create a measure from a value expressed in canonical (SI) units."""
        return Measure(value, self)

    def from_units(self, value: float, units: Units) -> Measure:
        """Create a measure from a value expressed in ``units``."""
        if units.family != self.family:
            raise DimensionalError(
                f"Units '{units.symbol_key}' of family {units.family} cannot express "
                f"{self.name_key} ({self.family})"
            )
        return Measure(units.convert_to_canonical(value), self)

    def __call__(self, value: float, units: Optional[Units] = None) -> Measure:
        if units is None:
            return self.of(value)
        return self.from_units(value, units)

    def validate(self, value: float) -> float:
        return self.restriction.validate(value, self.name_key)

    def __repr__(self) -> str:
        return f"Quantity({self.name_key!r}, family={self.family})"


@lru_cache(maxsize=256)
def anonymous_quantity(family: Family) -> Quantity:
    """Unrestricted quantity for a family with no registered quantity type."""
    return Quantity(
        str(family),
        family,
        family.si_symbol(),
        names=STATIC_NAMES,
        named=False,
    )
