"""Localized text lookup.

Only key based lookup is provided. Catalogs are flat tables of
``key = "text"`` pairs; keys may be qualified by module and node
(``atk.error_format_mismatch`` or ``atk.employee.error_format_mismatch``).
Templates use printf-style placeholders.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Protocol

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

DEFAULT_MESSAGES: dict[str, str] = {
    "error_format_mismatch": "Element %d has an invalid format, expected: %s",
    "error_obligatory_field": "Required field",
}


class TextLookup(Protocol):
    """Collaborator returning localized text for a key."""

    def translate(self, key: str, module: str = "atk", node: str | None = None) -> str:
        ...


class Translator:
    """Dictionary backed translator with built-in English defaults."""

    def __init__(self, catalog: dict[str, str] | None = None, language: str = "en"):
        """
        Initialize translator.

        Args:
            catalog: Key → text mapping, overriding the defaults
            language: Language code of the catalog
        """
        self.language = language
        self._catalog = {**DEFAULT_MESSAGES, **(catalog or {})}

    def translate(self, key: str, module: str = "atk", node: str | None = None) -> str:
        """
        Get localized text for a key.

        Lookup order is ``module.node.key``, ``module.key``, then ``key``.
        Unknown keys are returned unchanged.

        Args:
            key: Text key
            module: Module the key belongs to
            node: Optional node name for node-specific overrides

        Returns:
            Localized text
        """
        candidates = []
        if node:
            candidates.append(f"{module}.{node}.{key}")
        candidates.append(f"{module}.{key}")
        candidates.append(key)

        for candidate in candidates:
            if candidate in self._catalog:
                return self._catalog[candidate]

        logger.debug(f"No translation for '{key}' (language: {self.language})")
        return key

    @classmethod
    def from_toml(cls, path: Path | str, language: str = "en") -> Translator:
        """
        Load a catalog from the ``[<language>]`` table of a TOML file.

        Args:
            path: Path to the catalog file
            language: Language table to read

        Returns:
            Translator instance

        Raises:
            FileNotFoundError: If the catalog file doesn't exist
        """
        catalog_path = Path(path)
        if not catalog_path.exists():
            raise FileNotFoundError(f"Translation catalog not found: {catalog_path}")

        with open(catalog_path, "rb") as f:
            data = tomllib.load(f)

        table = data.get(language)
        if table is None:
            logger.warning(f"No [{language}] table in {catalog_path}, using defaults")
            table = {}

        return cls(_flatten(table), language=language)


def _flatten(table: dict, prefix: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in table.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{name}."))
        else:
            flat[name] = str(value)
    return flat
