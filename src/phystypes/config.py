"""Environment driven settings.

Settings are read on demand so tests (and long running hosts) observe changes
to the environment without reloading modules.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from .core.errors import ConfigurationError


DEFAULT_LOCALE = "en"
DEFAULT_TOLERANCE = 1e-9


class UnresolvedPolicy(str, Enum):
    """What to do when multiplication or division yields an unregistered family."""

    ANONYMOUS = "anonymous"
    RAISE = "raise"


@dataclass(frozen=True)
class Settings:
    locale: str = DEFAULT_LOCALE
    unresolved_policy: UnresolvedPolicy = UnresolvedPolicy.ANONYMOUS
    tolerance: float = DEFAULT_TOLERANCE
    units_file: Optional[Path] = None


def _parse_policy(raw: str) -> UnresolvedPolicy:
    try:
        return UnresolvedPolicy(raw.strip().lower())
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in UnresolvedPolicy)
        raise ConfigurationError(
            f"PHYSTYPES_UNRESOLVED must be one of {choices}, got {raw!r}"
        ) from exc


def _parse_tolerance(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"PHYSTYPES_TOLERANCE must be a number, got {raw!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"PHYSTYPES_TOLERANCE must be positive and finite, got {raw!r}")
    return value


def load_settings() -> Settings:
    """Read settings from ``PHYSTYPES_*`` environment variables."""

    locale = os.getenv("PHYSTYPES_LOCALE", DEFAULT_LOCALE).strip() or DEFAULT_LOCALE
    policy = _parse_policy(os.getenv("PHYSTYPES_UNRESOLVED", UnresolvedPolicy.ANONYMOUS.value))
    tolerance = _parse_tolerance(os.getenv("PHYSTYPES_TOLERANCE", str(DEFAULT_TOLERANCE)))
    units_file_raw = os.getenv("PHYSTYPES_UNITS_FILE")
    units_file = Path(units_file_raw) if units_file_raw else None
    return Settings(
        locale=locale,
        unresolved_policy=policy,
        tolerance=tolerance,
        units_file=units_file,
    )
