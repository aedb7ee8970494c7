"""Tests for Translator class."""

from pathlib import Path

import pytest
from fieldmask import Translator
from fieldmask.i18n import DEFAULT_MESSAGES


class TestTranslatorTranslate:
    """Tests for Translator.translate()."""

    def test_default_messages(self) -> None:
        """Test that built-in English messages are available."""
        translator = Translator()

        assert translator.translate("error_format_mismatch") == DEFAULT_MESSAGES[
            "error_format_mismatch"
        ]

    def test_unknown_key_returns_key(self) -> None:
        """Test that missing keys come back unchanged."""
        assert Translator().translate("no_such_key") == "no_such_key"

    def test_catalog_overrides_default(self) -> None:
        """Test that catalog entries replace defaults."""
        translator = Translator({"error_obligatory_field": "Verplicht veld"}, language="nl")

        assert translator.translate("error_obligatory_field") == "Verplicht veld"
        assert translator.language == "nl"

    def test_module_and_node_lookup_order(self) -> None:
        """Test that node-specific keys win over module keys."""
        translator = Translator(
            {
                "fleet.error_format_mismatch": "module text",
                "fleet.vehicle.error_format_mismatch": "node text",
            }
        )

        assert translator.translate("error_format_mismatch", "fleet", "vehicle") == "node text"
        assert translator.translate("error_format_mismatch", "fleet", "driver") == "module text"
        assert translator.translate("error_format_mismatch", "other") == DEFAULT_MESSAGES[
            "error_format_mismatch"
        ]


class TestTranslatorFromToml:
    """Tests for Translator.from_toml()."""

    def test_load_language_table(self, tmp_path: Path) -> None:
        """Test loading the requested language table."""
        catalog = tmp_path / "messages.toml"
        catalog.write_text(
            '[nl]\nerror_format_mismatch = "Element %d heeft formaat %s nodig"\n'
            '[nl.fleet]\nerror_obligatory_field = "Verplicht"\n'
        )

        translator = Translator.from_toml(catalog, "nl")

        assert translator.translate("error_format_mismatch") == "Element %d heeft formaat %s nodig"
        assert translator.translate("error_obligatory_field", "fleet") == "Verplicht"

    def test_missing_language_uses_defaults(self, tmp_path: Path) -> None:
        """Test that a missing language table falls back to defaults."""
        catalog = tmp_path / "messages.toml"
        catalog.write_text('[nl]\nclose = "Sluiten"\n')

        translator = Translator.from_toml(catalog, "de")

        assert translator.translate("close") == "close"
        assert translator.translate("error_obligatory_field") == "Required field"

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing catalog raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            Translator.from_toml(tmp_path / "missing.toml")
