"""Tests for value models."""

import pytest
from pydantic import ValidationError

from swatchbook.models import (
    AppConfig,
    ColorRecord,
    DragTokenAdapter,
    EndOfListToken,
    EntryToken,
    PaletteDocument,
    PaletteEntry,
    StagingToken,
    derive_key,
)


@pytest.mark.unit
class TestDeriveKey:
    """Test key derivation."""

    def test_unnamed_key_is_hex(self):
        assert derive_key("#ff0000") == "#ff0000"

    def test_named_key_appends_name(self):
        assert derive_key("#ff0000", "Red") == "#ff0000_Red"

    def test_empty_name_counts_as_absent(self):
        assert derive_key("#ff0000", "") == "#ff0000"


@pytest.mark.unit
class TestPaletteEntry:
    """Test PaletteEntry construction."""

    def test_create_derives_key_from_normalized_hex(self):
        """Test that the key uses the lowercase #rrggbb form."""
        entry = PaletteEntry.create("FF0000", "Red")

        assert entry.hex_color == "#ff0000"
        assert entry.name == "Red"
        assert entry.key == "#ff0000_Red"

    def test_supplied_key_is_ignored(self):
        """Test that a caller cannot hand in a key that disagrees with the color."""
        entry = PaletteEntry(key="bogus", hex_color="#00ff00")
        assert entry.key == "#00ff00"

    def test_same_hex_different_names_are_distinct(self):
        plain = PaletteEntry.create("#00ff00")
        named = PaletteEntry.create("#00ff00", "Lime")

        assert plain.key != named.key
        assert plain != named

    def test_invalid_hex_rejected(self):
        with pytest.raises(ValidationError):
            PaletteEntry.create("#00ff0")

    def test_entry_is_frozen(self):
        """Test that an entry cannot be edited in place."""
        entry = PaletteEntry.create("#00ff00")
        with pytest.raises(ValidationError):
            entry.name = "Lime"


@pytest.mark.unit
class TestPaletteDocument:
    """Test the on-disk document model."""

    def test_parses_schema_alias(self):
        document = PaletteDocument.model_validate(
            {
                "$schema": "./colors.schema.json",
                "colors": [{"hex_color": "#FF0000", "name": "Red"}, {"hex_color": "#00ff00"}],
            }
        )

        assert document.schema_ref == "./colors.schema.json"
        assert [entry.key for entry in document.to_entries()] == ["#ff0000_Red", "#00ff00"]

    def test_schema_reference_is_optional(self):
        document = PaletteDocument.model_validate({"colors": []})
        assert document.schema_ref is None
        assert document.to_entries() == []

    def test_from_entries_drops_keys(self):
        """Test that stored records carry only hex and name."""
        document = PaletteDocument.from_entries([PaletteEntry.create("#0000ff", "Blue")])
        dumped = document.model_dump(by_alias=True, exclude_none=True)

        assert dumped == {
            "$schema": "./colors.schema.json",
            "colors": [{"hex_color": "#0000ff", "name": "Blue"}],
        }

    def test_record_rejects_invalid_hex(self):
        with pytest.raises(ValidationError):
            ColorRecord(hex_color="blue")


@pytest.mark.unit
class TestDragTokens:
    """Test drag token parsing."""

    @pytest.mark.parametrize(
        "payload, expected",
        [
            ({"kind": "staging"}, StagingToken()),
            ({"kind": "end_of_list"}, EndOfListToken()),
            ({"kind": "entry", "key": "#ff0000"}, EntryToken(key="#ff0000")),
        ],
    )
    def test_adapter_discriminates_on_kind(self, payload, expected):
        assert DragTokenAdapter.validate_python(payload) == expected

    def test_entry_token_requires_key(self):
        with pytest.raises(ValidationError):
            DragTokenAdapter.validate_python({"kind": "entry"})

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            DragTokenAdapter.validate_python({"kind": "trash"})


@pytest.mark.unit
class TestAppConfig:
    """Test AppConfig defaults and validation."""

    def test_default_paths(self, temp_dir):
        config = AppConfig(resources_dir=temp_dir)

        assert config.palette_path == temp_dir / "colors.json"
        assert config.schema_path == temp_dir / "colors.schema.json"

    def test_defaults(self):
        config = AppConfig()

        assert config.neighborhood_radius == 10
        assert config.sample_hotkey == "ctrl"
        assert config.refresh_hotkey == "shift"
        assert config.create_missing_palette is True

    def test_unknown_hotkey_rejected(self):
        with pytest.raises(ValidationError):
            AppConfig(sample_hotkey="meta")

    def test_load_missing_file_returns_default(self, temp_dir):
        config = AppConfig.load_or_default(temp_dir / "missing.json")
        assert config.palette_filename == "colors.json"

    def test_save_and_reload(self, temp_dir):
        """Test that a saved config loads back with the same values."""
        path = temp_dir / "config.json"
        AppConfig(resources_dir=temp_dir, sample_hotkey="alt", neighborhood_radius=3).save(path)

        loaded = AppConfig.load_or_default(path)

        assert loaded.resources_dir == temp_dir
        assert loaded.sample_hotkey == "alt"
        assert loaded.neighborhood_radius == 3
