"""JSON units catalogues.

A catalogue adds units to quantities that are already registered::

    {
      "units": [
        {"quantity": "phys.Length.name", "symbol": "nmi", "scale": 1852.0},
        {"quantity": "Temperature", "symbol": "°Ra", "scale": 0.5555555555555556}
      ]
    }

``quantity`` is either the quantity's resource key or its display name.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, List, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .converters import LinearConverter
from .errors import ConfigurationError
from .registry import FamilyRegistry
from .resources import STATIC_NAMES
from .units import Units

logger = logging.getLogger(__name__)


class UnitDefinitionModel(BaseModel):
    """Single catalogue entry."""

    quantity: str = Field(..., min_length=1)
    symbol: str = Field(..., min_length=1)
    scale: float = 1.0
    offset: float = 0.0

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("scale")
    @classmethod
    def validate_scale(cls, v: float) -> float:
        if not math.isfinite(v) or v == 0.0:
            raise ValueError(f"scale must be finite and non-zero, got {v}")
        return v

    @field_validator("offset")
    @classmethod
    def validate_offset(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"offset must be finite, got {v}")
        return v


class UnitCatalogModel(BaseModel):
    units: List[UnitDefinitionModel] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


def _read_catalog(source: Union[str, Path, Mapping[str, Any]]) -> UnitCatalogModel:
    if isinstance(source, Mapping):
        payload: Any = source
    else:
        path = Path(source)
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigurationError(f"Cannot read units catalogue {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Units catalogue {path} is not valid JSON: {exc}") from exc
    try:
        return UnitCatalogModel.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid units catalogue: {exc}") from exc


def load_unit_catalog(
    source: Union[str, Path, Mapping[str, Any]],
    registry: FamilyRegistry,
) -> List[Units]:
    """Define every catalogue entry on its registered quantity."""

    catalog = _read_catalog(source)
    defined: List[Units] = []
    for entry in catalog.units:
        quantity = registry.find_quantity(entry.quantity)
        if quantity is None:
            raise ConfigurationError(f"Units catalogue names unknown quantity '{entry.quantity}'")
        try:
            units = quantity.define_units(
                entry.symbol,
                LinearConverter(scale=entry.scale, offset=entry.offset),
                names=STATIC_NAMES,
            )
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
        defined.append(units)
    logger.info("Loaded %d catalogue units", len(defined))
    return defined
