"""Units of measurement bound to a quantity family."""

from __future__ import annotations

from dataclasses import dataclass, field

from .converters import Converter, LinearConverter
from .dimensions import Family
from .resources import LIB_RESOURCE, NameProvider


@dataclass(frozen=True)
class Units:
    """A converter paired with a display symbol, belonging to one family.

    ``symbol_key`` is resolved through ``names`` so that symbols can be
    localised; units defined from a catalogue use a provider that returns the
    key itself.
    """

    converter: Converter
    symbol_key: str
    family: Family
    names: NameProvider = field(default=LIB_RESOURCE, compare=False, repr=False)

    def convert_to_canonical(self, value: float) -> float:
        return self.converter.to_canonical(value)

    def convert_from_canonical(self, value: float) -> float:
        return self.converter.from_canonical(value)

    @property
    def symbol(self) -> str:
        return self.names.lookup(self.symbol_key)

    @property
    def is_canonical(self) -> bool:
        return isinstance(self.converter, LinearConverter) and self.converter.is_identity

    def __str__(self) -> str:
        return self.symbol
