"""Domain restriction policies applied when a measure is constructed."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import DomainError


@dataclass(frozen=True)
class Restriction:
    """Lower bound on canonical values.

    Every restriction rejects non-finite values; ``minimum`` additionally
    bounds the value from below (inclusive).
    """

    name: str
    minimum: float = -math.inf

    def validate(self, value: float, quantity_name: str = "measure") -> float:
        """Return ``value`` unchanged or raise :class:`DomainError`."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{quantity_name} value must be a real number, got {type(value)}")
        value = float(value)
        if not math.isfinite(value):
            raise DomainError(f"{quantity_name} value must be finite, got {value}")
        if value < self.minimum:
            raise DomainError(
                f"{quantity_name} value must be >= {self.minimum}, got {value}"
            )
        return value


UNRESTRICTED = Restriction("unrestricted")
NON_NEGATIVE = Restriction("non-negative", minimum=0.0)
