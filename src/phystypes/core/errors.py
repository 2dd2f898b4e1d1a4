"""Exception hierarchy for phystypes."""

from __future__ import annotations


class PhysTypesError(Exception):
    """Base class for all errors raised by phystypes."""


class DimensionalError(PhysTypesError):
    """Raised when an operation combines measures of incompatible families."""


class DomainError(PhysTypesError, ValueError):
    """Raised when a value is not acceptable for the quantity it would represent."""


class MeasureZeroDivisionError(PhysTypesError, ZeroDivisionError):
    """Raised when a measure is divided by an exact zero."""


class UnresolvedFamilyError(PhysTypesError, LookupError):
    """Raised when a named quantity is required but none is registered."""


class ConverterError(PhysTypesError, ValueError):
    """Raised when a converter cannot be inverted."""


class ConfigurationError(PhysTypesError):
    """Raised for invalid settings or units catalogues."""


class RegistrationError(ConfigurationError):
    """Raised on a duplicate or conflicting family registration."""


class ResourceError(PhysTypesError, KeyError):
    """Raised when a name or symbol resource cannot be found."""
