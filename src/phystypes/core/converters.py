"""Linear converters between external units and canonical SI values."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .errors import ConverterError


class Converter(ABC):
    """Reversible transform between a unit and the canonical representation.

    Implementations must be mutual inverses: ``from_canonical(to_canonical(x))``
    returns ``x`` within floating-point tolerance for every finite ``x``.
    """

    @abstractmethod
    def to_canonical(self, value: float) -> float:
        """Convert ``value`` expressed in these units into canonical units."""

    @abstractmethod
    def from_canonical(self, value: float) -> float:
        """Convert a canonical ``value`` into these units."""

    def is_invertible(self, value: float, rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> bool:
        """Check the round-trip contract at ``value``."""
        round_trip = self.from_canonical(self.to_canonical(value))
        return math.isclose(round_trip, value, rel_tol=rel_tol, abs_tol=abs_tol)


@dataclass(frozen=True)
class LinearConverter(Converter):
    """Affine converter ``canonical = value * scale + offset``."""

    scale: float = 1.0
    offset: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.scale) or self.scale == 0.0:
            raise ConverterError(f"Converter scale must be finite and non-zero, got {self.scale}")
        if not math.isfinite(self.offset):
            raise ConverterError(f"Converter offset must be finite, got {self.offset}")

    def to_canonical(self, value: float) -> float:
        return value * self.scale + self.offset

    def from_canonical(self, value: float) -> float:
        return (value - self.offset) / self.scale

    @property
    def is_identity(self) -> bool:
        return self.scale == 1.0 and self.offset == 0.0


SI_CONVERTER = LinearConverter()


def scaled(scale: float) -> LinearConverter:
    """Return a purely multiplicative converter."""
    return LinearConverter(scale=scale)


def affine(scale: float, offset: float) -> LinearConverter:
    """Return a converter with both scale and offset, e.g. for temperatures."""
    return LinearConverter(scale=scale, offset=offset)
