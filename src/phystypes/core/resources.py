"""Locale-specific name and symbol lookup.

Quantities and units only carry resource keys; display strings are resolved
through a :class:`NameProvider` when they are needed. The bundled provider
reads JSON files named ``<bundle>_<locale>.json`` from the package's
``resources`` directory, falling back to the ``en`` bundle for missing keys.
"""

from __future__ import annotations

import json
import logging
import threading
from importlib import resources as importlib_resources
from typing import Dict, Optional, Protocol

from ..config import DEFAULT_LOCALE, load_settings
from .errors import ResourceError

logger = logging.getLogger(__name__)


class NameProvider(Protocol):
    """Anything able to turn a resource key into a display string."""

    def lookup(self, key: str, *args: object) -> str:
        ...


class Resource:
    """JSON backed string bundle with locale fallback.

    Bundles are loaded on first lookup; the locale defaults to the
    ``PHYSTYPES_LOCALE`` setting at that time.
    """

    def __init__(self, bundle_name: str, locale: Optional[str] = None, package: str = "phystypes") -> None:
        if not bundle_name:
            raise ValueError("bundle_name must be a non-empty string")
        self.bundle_name = bundle_name
        self.package = package
        self._locale = locale
        self._strings: Optional[Dict[str, str]] = None
        self._lock = threading.Lock()

    @property
    def locale(self) -> str:
        return self._locale or load_settings().locale

    def lookup(self, key: str, *args: object) -> str:
        """Return the string for ``key``, formatted with ``args`` if supplied."""
        strings = self._load()
        try:
            template = strings[key]
        except KeyError:
            raise ResourceError(f"No resource '{key}' in bundle '{self.bundle_name}'") from None
        if args:
            return template.format(*args)
        return template

    __call__ = lookup

    def __contains__(self, key: str) -> bool:
        return key in self._load()

    # ------------------------------------------------------------------
    def _load(self) -> Dict[str, str]:
        strings = self._strings
        if strings is not None:
            return strings
        with self._lock:
            if self._strings is None:
                self._strings = self._read_bundles(self.locale)
            return self._strings

    def _read_bundles(self, locale: str) -> Dict[str, str]:
        strings = self._read_file(f"{self.bundle_name}_{DEFAULT_LOCALE}.json")
        if strings is None:
            raise ResourceError(
                f"Default bundle '{self.bundle_name}_{DEFAULT_LOCALE}.json' is missing"
            )
        if locale != DEFAULT_LOCALE:
            localized = self._read_file(f"{self.bundle_name}_{locale}.json")
            if localized is None:
                logger.warning(
                    "No '%s' bundle for locale %s; using %s",
                    self.bundle_name,
                    locale,
                    DEFAULT_LOCALE,
                )
            else:
                strings = {**strings, **localized}
        return strings

    def _read_file(self, filename: str) -> Optional[Dict[str, str]]:
        path = importlib_resources.files(self.package) / "resources" / filename
        if not path.is_file():
            return None
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ResourceError(f"Bundle '{filename}' must contain a JSON object")
        return {str(key): str(value) for key, value in data.items()}


class StaticNames:
    """Provider that returns keys verbatim; used for catalogue-defined units."""

    def lookup(self, key: str, *args: object) -> str:
        return key.format(*args) if args else key


LIB_RESOURCE = Resource("lib")
STATIC_NAMES = StaticNames()
