"""
Localization — Read-only translation tables for enum descriptions.

Providers answer ``translate(key, locale)`` with a string or None. They are
passed explicitly to description resolution; nothing here is global.

Translation keys are dotted paths such as ``enums.user_type.3``. Tables
may store them flat (``{"enums.user_type.3": "..."}``), nested
(``{"enums": {"user_type": {"3": "..."}}}``), or any mix of the two.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from threading import Lock
from typing import Any, Mapping, Protocol, runtime_checkable

from constenum.core.errors import ConstEnumError
from constenum.observability.logging import get_logger


logger = get_logger("description.localization")


class LocalizationError(ConstEnumError):
    """Raised when a translation source is malformed."""
    pass


@runtime_checkable
class LocalizationProvider(Protocol):
    """Anything that can translate a dotted key for a locale."""

    def translate(self, key: str, locale: str | None = None) -> str | None:
        ...


def lookup_translation(table: Mapping[str, Any], key: str) -> str | None:
    """
    Find ``key`` in a flat, nested, or mixed translation table.

    Flat matches win over nested ones at every level. Non-string leaves
    are ignored.
    """
    entry = table.get(key)
    if isinstance(entry, str):
        return entry

    start = 0
    while True:
        dot = key.find(".", start)
        if dot == -1:
            return None
        node = table.get(key[:dot])
        if isinstance(node, Mapping):
            found = lookup_translation(node, key[dot + 1:])
            if found is not None:
                return found
        start = dot + 1


class FallbackProvider(ABC):
    """
    Base for providers that try the requested locale, then a fallback.

    Args:
        locale: Locale used when ``translate`` is called without one
        fallback_locale: Locale tried when the first has no entry
    """

    def __init__(self, locale: str = "en", fallback_locale: str | None = None):
        self.locale = locale
        self.fallback_locale = fallback_locale

    def candidate_locales(self, locale: str | None = None) -> list[str]:
        order = [locale or self.locale]
        if self.fallback_locale and self.fallback_locale not in order:
            order.append(self.fallback_locale)
        return order

    def translate(self, key: str, locale: str | None = None) -> str | None:
        for candidate in self.candidate_locales(locale):
            text = self.lookup(candidate, key)
            if text is not None:
                return text
        return None

    @abstractmethod
    def lookup(self, locale: str, key: str) -> str | None:
        """Translation for exactly one locale, or None."""
        ...


class DictLocalizationProvider(FallbackProvider):
    """
    In-memory translations keyed by locale.

    Example:
        provider = DictLocalizationProvider(
            {"es": {"enums.user_type.3": "Súper administrador"}},
            locale="es",
        )
    """

    def __init__(
        self,
        translations: Mapping[str, Mapping[str, Any]],
        locale: str = "en",
        fallback_locale: str | None = None,
    ):
        super().__init__(locale, fallback_locale)
        self._translations = translations

    def lookup(self, locale: str, key: str) -> str | None:
        table = self._translations.get(locale)
        if table is None:
            return None
        return lookup_translation(table, key)


class JsonLocalizationProvider(FallbackProvider):
    """
    Translations read from JSON files on disk.

    Layout:
        <path>/<locale>/<namespace>.json   keys without the namespace prefix
        <path>/<locale>.json               full dotted keys

    For ``enums.user_type.3`` the namespace file is ``enums.json`` and the
    key looked up inside it is ``user_type.3``. Files are read on first
    use and cached; missing files behave like empty tables.
    """

    def __init__(
        self,
        path: str | Path,
        locale: str = "en",
        fallback_locale: str | None = None,
    ):
        super().__init__(locale, fallback_locale)
        self.path = Path(path)
        self._files: dict[Path, Mapping[str, Any]] = {}
        self._lock = Lock()

    def lookup(self, locale: str, key: str) -> str | None:
        namespace, _, rest = key.partition(".")
        if rest:
            text = lookup_translation(self._load(self.path / locale / f"{namespace}.json"), rest)
            if text is not None:
                return text
        return lookup_translation(self._load(self.path / f"{locale}.json"), key)

    def _load(self, file: Path) -> Mapping[str, Any]:
        cached = self._files.get(file)
        if cached is not None:
            return cached

        table = self._read(file)
        with self._lock:
            return self._files.setdefault(file, table)

    def _read(self, file: Path) -> Mapping[str, Any]:
        if not file.is_file():
            return {}
        try:
            data = json.loads(file.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise LocalizationError(f"Malformed translation file {file}: {e}") from e
        if not isinstance(data, dict):
            raise LocalizationError(
                f"Translation file {file} must contain an object, got {type(data).__name__}"
            )
        logger.debug("Loaded %d translation entries from %s", len(data), file)
        return data

    def clear(self) -> None:
        """Forget loaded files so edits on disk are picked up."""
        with self._lock:
            self._files.clear()
