"""Physical quantity families.

A family is an integer exponent vector over the seven SI base dimensions
(length, mass, time, electric current, temperature, amount of substance,
luminous intensity). Families identify *what kind* of quantity a measure is:
multiplying measures adds their exponent vectors, dividing subtracts them and
integer powers scale them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


_BASE_FIELDS: Tuple[str, ...] = (
    "length",
    "mass",
    "time",
    "current",
    "temperature",
    "amount",
    "luminosity",
)

_BASE_SYMBOLS: Tuple[str, ...] = ("L", "M", "T", "I", "Θ", "N", "J")
_SI_SYMBOLS: Tuple[str, ...] = ("m", "kg", "s", "A", "K", "mol", "cd")


class FamilyOp(str, Enum):
    """Exponent arithmetic applied by :meth:`Family.combine`."""

    ADD = "add"
    SUBTRACT = "subtract"


@dataclass(frozen=True)
class Family:
    """Dimensional family of a physical quantity.

    Exponents are stored in the order ``(L, M, T, I, Θ, N, J)``; unspecified
    exponents default to zero, so ``Family(current=1)`` is the family of
    electric current and ``Family()`` is the dimensionless family.
    """

    length: int = 0
    mass: int = 0
    time: int = 0
    current: int = 0
    temperature: int = 0
    amount: int = 0
    luminosity: int = 0

    def __post_init__(self) -> None:
        """Ensure all exponents are integers."""
        for field in _BASE_FIELDS:
            value = getattr(self, field)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(
                    f"Family exponent {field} must be an integer, got {type(value)}"
                )

    @classmethod
    def apply(
        cls,
        length_exponent: int = 0,
        mass_exponent: int = 0,
        time_exponent: int = 0,
        current_exponent: int = 0,
        temperature_exponent: int = 0,
        amount_exponent: int = 0,
        luminous_exponent: int = 0,
    ) -> Family:
        """Construct a family from named exponents."""
        return cls(
            length_exponent,
            mass_exponent,
            time_exponent,
            current_exponent,
            temperature_exponent,
            amount_exponent,
            luminous_exponent,
        )

    @classmethod
    def from_exponents(cls, exponents: Tuple[int, ...]) -> Family:
        if len(exponents) != len(_BASE_FIELDS):
            raise ValueError(
                f"Family requires {len(_BASE_FIELDS)} exponents, got {len(exponents)}"
            )
        return cls(*exponents)

    # -- Core algebra -----------------------------------------------------
    def combine(self, other: Family, op: FamilyOp) -> Family:
        """Add or subtract exponent vectors component-wise."""
        if not isinstance(other, Family):
            raise TypeError(f"Cannot combine Family with {type(other)}")

        if op is FamilyOp.ADD:
            pairs = [a + b for a, b in zip(self.exponents, other.exponents)]
        elif op is FamilyOp.SUBTRACT:
            pairs = [a - b for a, b in zip(self.exponents, other.exponents)]
        else:
            raise ValueError(f"Unsupported family operation {op!r}")
        return Family(*pairs)

    def scale(self, factor: int) -> Family:
        """Multiply every exponent by ``factor`` (used for integer powers)."""
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Family scale factor must be integer, got {type(factor)}")

        return Family(*[value * factor for value in self.exponents])

    def __mul__(self, other: Family) -> Family:
        if not isinstance(other, Family):
            return NotImplemented
        return self.combine(other, FamilyOp.ADD)

    def __truediv__(self, other: Family) -> Family:
        if not isinstance(other, Family):
            return NotImplemented
        return self.combine(other, FamilyOp.SUBTRACT)

    def __pow__(self, exponent: int) -> Family:
        return self.scale(exponent)

    # -- Helpers ----------------------------------------------------------
    @property
    def exponents(self) -> Tuple[int, ...]:
        return tuple(getattr(self, field) for field in _BASE_FIELDS)

    def is_dimensionless(self) -> bool:
        """Return ``True`` when all exponents are zero."""
        return all(value == 0 for value in self.exponents)

    def si_symbol(self) -> str:
        """Render the family as a product of SI base unit symbols."""
        return self._render(_SI_SYMBOLS) or "1"

    def __str__(self) -> str:
        return self._render(_BASE_SYMBOLS) or "dimensionless"

    def _render(self, symbols: Tuple[str, ...]) -> str:
        parts = []
        for symbol, power in zip(symbols, self.exponents):
            if power == 0:
                continue
            if power == 1:
                parts.append(symbol)
            else:
                parts.append(f"{symbol}^{power}")
        return "·".join(parts)


DIMENSIONLESS = Family()
LENGTH = Family(length=1)
MASS = Family(mass=1)
TIME = Family(time=1)
CURRENT = Family(current=1)
TEMPERATURE = Family(temperature=1)
AMOUNT = Family(amount=1)
LUMINOSITY = Family(luminosity=1)

AREA = LENGTH**2
VOLUME = LENGTH**3
VELOCITY = LENGTH / TIME
ACCELERATION = LENGTH / (TIME**2)
FREQUENCY = DIMENSIONLESS / TIME
FORCE = MASS * ACCELERATION
ENERGY = FORCE * LENGTH
POWER = ENERGY / TIME
CHARGE = CURRENT * TIME
VOLTAGE = POWER / CURRENT
