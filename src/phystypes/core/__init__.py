"""Core primitives: families, converters, units, measures and the registry."""

from .converters import SI_CONVERTER, Converter, LinearConverter, affine, scaled
from .dimensions import DIMENSIONLESS, Family, FamilyOp
from .errors import (
    ConfigurationError,
    ConverterError,
    DimensionalError,
    DomainError,
    MeasureZeroDivisionError,
    PhysTypesError,
    RegistrationError,
    ResourceError,
    UnresolvedFamilyError,
)
from .measure import Measure
from .quantity import Quantity, anonymous_quantity
from .registry import FamilyRegistry
from .resources import LIB_RESOURCE, NameProvider, Resource
from .restrictions import NON_NEGATIVE, UNRESTRICTED, Restriction
from .units import Units

__all__ = [
    "SI_CONVERTER",
    "Converter",
    "LinearConverter",
    "affine",
    "scaled",
    "DIMENSIONLESS",
    "Family",
    "FamilyOp",
    "ConfigurationError",
    "ConverterError",
    "DimensionalError",
    "DomainError",
    "MeasureZeroDivisionError",
    "PhysTypesError",
    "RegistrationError",
    "ResourceError",
    "UnresolvedFamilyError",
    "Measure",
    "Quantity",
    "anonymous_quantity",
    "FamilyRegistry",
    "LIB_RESOURCE",
    "NameProvider",
    "Resource",
    "NON_NEGATIVE",
    "UNRESTRICTED",
    "Restriction",
    "Units",
]
