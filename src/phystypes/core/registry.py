"""Mapping from families to the quantity types responsible for them."""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from ..config import UnresolvedPolicy, load_settings
from .dimensions import Family
from .errors import RegistrationError, UnresolvedFamilyError
from .quantity import Quantity, anonymous_quantity
from .units import Units

logger = logging.getLogger(__name__)


class FamilyRegistry:
    """Registry of quantity types keyed by family.

    Each family maps to at most one quantity. Registering the same quantity
    twice is a no-op; registering a different quantity for an already claimed
    family raises :class:`RegistrationError`.

    Writes are serialised by a lock and publish a fresh read-only mapping, so
    lookups never block.
    """

    def __init__(self, unresolved_policy: Optional[UnresolvedPolicy] = None) -> None:
        self._entries: Mapping[Family, Quantity] = MappingProxyType({})
        self._lock = threading.Lock()
        self._policy = UnresolvedPolicy(unresolved_policy) if unresolved_policy is not None else None

    @property
    def unresolved_policy(self) -> UnresolvedPolicy:
        if self._policy is not None:
            return self._policy
        return load_settings().unresolved_policy

    # ------------------------------------------------------------------
    def register(self, quantity: Quantity) -> Quantity:
        """Register ``quantity`` under its own family and return it."""
        self.register_family(quantity.family, quantity)
        return quantity

    def register_family(self, family: Family, quantity: Quantity) -> None:
        if not isinstance(quantity, Quantity):
            raise TypeError(f"Expected a Quantity, got {type(quantity)}")
        if family != quantity.family:
            raise RegistrationError(
                f"Cannot register {quantity.name_key} ({quantity.family}) under family {family}"
            )
        if not quantity.is_named:
            raise RegistrationError(f"Anonymous quantity for {family} cannot be registered")

        with self._lock:
            existing = self._entries.get(family)
            if existing is quantity:
                logger.debug("Family %s already registered to %s", family, quantity.name_key)
                return
            if existing is not None:
                logger.error(
                    "Conflicting registration for family %s: %s vs %s",
                    family,
                    existing.name_key,
                    quantity.name_key,
                )
                raise RegistrationError(
                    f"Family {family} is already registered to {existing.name_key}; "
                    f"cannot register {quantity.name_key}"
                )
            self._entries = MappingProxyType({**self._entries, family: quantity})
        logger.debug("Registered %s for family %s", quantity.name_key, family)

    def lookup(self, family: Family) -> Optional[Quantity]:
        return self._entries.get(family)

    def require(self, family: Family) -> Quantity:
        """Return the named quantity for ``family`` or raise :class:`UnresolvedFamilyError`."""
        quantity = self._entries.get(family)
        if quantity is None:
            raise UnresolvedFamilyError(f"No quantity registered for family {family}")
        return quantity

    def resolve(self, family: Family, policy: Optional[UnresolvedPolicy] = None) -> Quantity:
        """Return the quantity producing results of ``family``.

        Unregistered families yield an anonymous quantity, or raise, depending
        on ``policy`` (defaulting to the registry's policy).
        """
        quantity = self._entries.get(family)
        if quantity is not None:
            return quantity
        policy = policy or self.unresolved_policy
        if policy is UnresolvedPolicy.RAISE:
            raise UnresolvedFamilyError(f"No quantity registered for family {family}")
        logger.debug("No quantity registered for family %s; using anonymous quantity", family)
        return anonymous_quantity(family)

    # ------------------------------------------------------------------
    def find_quantity(self, name: str) -> Optional[Quantity]:
        """Find a registered quantity by resource key or display name."""
        for quantity in self._entries.values():
            if name == quantity.name_key or name == quantity.name:
                return quantity
        return None

    def find_units(self, symbol: str) -> Units:
        """Find units by symbol (or symbol key) across all registered quantities."""
        for quantity in self._entries.values():
            try:
                return quantity.units(symbol)
            except KeyError:
                continue
        raise KeyError(f"No registered quantity has units '{symbol}'")

    def quantities(self) -> Tuple[Quantity, ...]:
        return tuple(self._entries.values())

    def __contains__(self, family: object) -> bool:
        return family in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Family]:
        return iter(self._entries)
