"""Immutable physical measures.

A :class:`Measure` stores a single value in the canonical (SI) units of its
quantity. Every operation returns a new measure; results are validated by the
quantity that owns them, so a restricted quantity (e.g. a non-negative one)
can never hold an invalid value.

Addition, subtraction and comparison require identical families.
Multiplication, division and integer powers derive a new family and resolve
the quantity responsible for it through a
:class:`~phystypes.core.registry.FamilyRegistry`; when no registry is passed
explicitly the process-wide default registry is used.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import TYPE_CHECKING, Optional

from ..config import load_settings
from .dimensions import DIMENSIONLESS, Family, FamilyOp
from .errors import DimensionalError, DomainError, MeasureZeroDivisionError

if TYPE_CHECKING:
    from .quantity import Quantity
    from .registry import FamilyRegistry
    from .units import Units


def _is_scalar(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _registry(registry: Optional[FamilyRegistry]) -> FamilyRegistry:
    if registry is not None:
        return registry
    from ..phys import default_registry

    return default_registry()


class Measure:
    """A value of a physical quantity, stored in canonical units."""

    __slots__ = ("_value", "_quantity")

    def __init__(self, value: float, quantity: Quantity) -> None:
        self._value = quantity.validate(value)
        self._quantity = quantity

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "_quantity"):
            raise AttributeError("Measure instances are immutable")
        object.__setattr__(self, name, value)

    # ------------------------------------------------------------------
    @property
    def value(self) -> float:
        """Value in canonical (SI) units."""
        return self._value

    @property
    def quantity(self) -> Quantity:
        return self._quantity

    @property
    def family(self) -> Family:
        return self._quantity.family

    def in_units(self, units: Units) -> float:
        """Project this measure into ``units``."""
        if units.family != self.family:
            raise DimensionalError(
                f"Cannot express {self.family} measure in units '{units.symbol_key}' "
                f"of family {units.family}"
            )
        return units.convert_from_canonical(self._value)

    def named(self, quantity: Quantity) -> Measure:
        """Re-tag this measure as ``quantity``, which must share its family."""
        if quantity.family != self.family:
            raise DimensionalError(
                f"Cannot treat {self.family} measure as {quantity.name_key} ({quantity.family})"
            )
        return quantity.of(self._value)

    # -- Same-family arithmetic ------------------------------------------
    def add(self, other: Measure) -> Measure:
        """Sum of two measures of the same family."""
        owner = self._homogeneous(other, "add")
        return owner.of(self._value + other._value)

    def subtract(self, other: Measure) -> Measure:
        """Difference of two measures of the same family."""
        owner = self._homogeneous(other, "subtract")
        return owner.of(self._value - other._value)

    def negate(self) -> Measure:
        """Measure with the sign of the value flipped."""
        return self._quantity.of(-self._value)

    def scale(self, factor: float) -> Measure:
        """Measure multiplied by a dimensionless real ``factor``."""
        if not _is_scalar(factor):
            raise TypeError(f"Scale factor must be a real number, got {type(factor)}")
        return self._quantity.of(self._value * factor)

    def abs(self) -> Measure:
        return self._quantity.of(abs(self._value))

    # -- Family-deriving arithmetic ---------------------------------------
    def multiply(self, other: Measure, registry: Optional[FamilyRegistry] = None) -> Measure:
        """Product of two measures; the result family adds exponents."""
        if not isinstance(other, Measure):
            raise TypeError(f"Cannot multiply Measure by {type(other)}")
        family = self.family.combine(other.family, FamilyOp.ADD)
        quantity = _registry(registry).resolve(family)
        return quantity.of(self._value * other._value)

    def divide(self, other: Measure, registry: Optional[FamilyRegistry] = None) -> Measure:
        """Quotient of two measures; the result family subtracts exponents."""
        if not isinstance(other, Measure):
            raise TypeError(f"Cannot divide Measure by {type(other)}")
        if other._value == 0.0:
            raise MeasureZeroDivisionError(f"Cannot divide {self!r} by zero {other.family} measure")
        family = self.family.combine(other.family, FamilyOp.SUBTRACT)
        quantity = _registry(registry).resolve(family)
        return quantity.of(self._value / other._value)

    def power(self, exponent: int, registry: Optional[FamilyRegistry] = None) -> Measure:
        """Measure raised to an integer power; the family exponents scale with it."""
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"Measure exponent must be integer, got {type(exponent)}")
        if exponent < 0 and self._value == 0.0:
            raise MeasureZeroDivisionError(f"Cannot raise zero {self.family} measure to a negative power")
        quantity = _registry(registry).resolve(self.family.scale(exponent))
        try:
            value = self._value**exponent
        except OverflowError as exc:
            raise DomainError(f"{self!r} raised to {exponent} overflows") from exc
        return quantity.of(value)

    # -- Comparison --------------------------------------------------------
    def compare(self, other: Measure) -> int:
        """Return -1, 0 or 1 as this measure is less than, equal to or greater than ``other``."""
        self._homogeneous(other, "compare")
        return (self._value > other._value) - (self._value < other._value)

    def is_close(self, other: Measure, rel_tol: Optional[float] = None, abs_tol: float = 0.0) -> bool:
        self._homogeneous(other, "compare")
        if rel_tol is None:
            rel_tol = load_settings().tolerance
        return math.isclose(self._value, other._value, rel_tol=rel_tol, abs_tol=abs_tol)

    def _homogeneous(self, other: Measure, action: str) -> Quantity:
        if not isinstance(other, Measure):
            raise TypeError(f"Cannot {action} Measure and {type(other)}")
        if self.family != other.family:
            raise DimensionalError(
                f"Cannot {action} measures with different families: {self.family} vs {other.family}"
            )
        if self._quantity.is_named or not other._quantity.is_named:
            return self._quantity
        return other._quantity

    # -- Operators ---------------------------------------------------------
    def __add__(self, other: object) -> Measure:
        if not isinstance(other, Measure):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Measure:
        if not isinstance(other, Measure):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> Measure:
        if isinstance(other, Measure):
            return self.multiply(other)
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: object) -> Measure:
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: object) -> Measure:
        if isinstance(other, Measure):
            return self.divide(other)
        if _is_scalar(other):
            if other == 0:
                raise MeasureZeroDivisionError(f"Cannot divide {self!r} by zero")
            return self._quantity.of(self._value / other)
        return NotImplemented

    def __rtruediv__(self, other: object) -> Measure:
        if not _is_scalar(other):
            return NotImplemented
        registry = _registry(None)
        return registry.resolve(DIMENSIONLESS).of(other).divide(self, registry)

    def __pow__(self, exponent: int) -> Measure:
        return self.power(exponent)

    def __neg__(self) -> Measure:
        return self.negate()

    def __pos__(self) -> Measure:
        return self

    def __abs__(self) -> Measure:
        return self.abs()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return self.compare(other) >= 0

    def __eq__(self, other: object) -> bool:
        # Measures of different families are never equal; ordering them raises.
        if not isinstance(other, Measure):
            return NotImplemented
        return self.family == other.family and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.family, self._value))

    # -- Formatting --------------------------------------------------------
    def to_string(self, units: Optional[Units] = None) -> str:
        units = units or self._quantity.si_units
        return f"{self.in_units(units):g} {units.symbol}".rstrip()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Measure({self._value!r}, {self._quantity.name_key})"
