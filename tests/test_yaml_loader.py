"""Tests for the YAML filter catalogue loader."""

import logging
from pathlib import Path

import pytest

from ffexpr.schema.registry import FilterCategory, FilterRegistry, OptionType
from ffexpr.schema.yaml_loader import (
    BUILTIN_CATALOG,
    _parse_option,
    load_builtin_catalog,
    load_catalog_dir,
    load_catalog_file,
    load_filters_from_yaml,
    parse_filter,
)


# ── Sample YAML content for testing ──────────────────────────────────

VALID_CATALOG_YAML = """
filters:
  - name: test_blur
    category: blur
    description: Blur for tests
    aliases: [tblur]
    tags: [smooth, soft]
    options:
      radius:
        type: int
        min: 1
        max: 10
        default: 2
        description: Blur radius
      mode:
        type: choice
        choices: [fast, slow]
  - name: test_flip
    category: spatial
    description: Flip for tests
"""

PARTLY_BROKEN_YAML = """
filters:
  - description: Missing name field
  - name: good_one
    category: color
  - name: bad_type
    options:
      level: {type: quaternion}
  - just a string
"""

INVALID_YAML = """
filters: [this is
  bad yaml: {{}}
"""

NO_FILTERS_YAML = """
name: not_a_catalog
"""


def _write(tmp_path: Path, content: str, name: str = "catalog.yaml") -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


# ── load_filters_from_yaml tests ──────────────────────────────────────

class TestLoadFiltersFromYaml:
    """Tests for parsing catalogue files."""

    def test_load_valid_catalog(self, tmp_path):
        schemas = load_filters_from_yaml(_write(tmp_path, VALID_CATALOG_YAML))
        assert [s.name for s in schemas] == ["test_blur", "test_flip"]

        blur = schemas[0]
        assert blur.category == FilterCategory.BLUR
        assert blur.aliases == ["tblur"]
        assert "smooth" in blur.tags

        radius = blur.get_option("radius")
        assert radius.type == OptionType.INT
        assert radius.min_value == 1
        assert radius.default == 2
        assert blur.get_option("mode").choices == ["fast", "slow"]

    def test_malformed_entries_skipped(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="ffexpr"):
            schemas = load_filters_from_yaml(_write(tmp_path, PARTLY_BROKEN_YAML))
        assert [s.name for s in schemas] == ["good_one"]
        assert "missing 'name'" in caplog.text
        assert "quaternion" in caplog.text

    def test_invalid_yaml_returns_empty(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="ffexpr"):
            assert load_filters_from_yaml(_write(tmp_path, INVALID_YAML)) == []
        assert "Failed to read filter catalogue" in caplog.text

    def test_missing_filters_list(self, tmp_path):
        assert load_filters_from_yaml(_write(tmp_path, NO_FILTERS_YAML)) == []

    def test_nonexistent_file_returns_empty(self, tmp_path):
        assert load_filters_from_yaml(tmp_path / "nonexistent.yaml") == []


# ── parse_filter / _parse_option tests ────────────────────────────────

class TestParseFilter:
    """Tests for the entry and option converters."""

    def test_unknown_category_is_custom(self):
        schema = parse_filter({"name": "x", "category": "sparkle"})
        assert schema.category == FilterCategory.CUSTOM

    def test_options_must_be_mapping(self):
        assert parse_filter({"name": "x", "options": ["a", "b"]}) is None

    def test_shorthand_option_type(self):
        schema = parse_filter({"name": "x", "options": {"exact": "bool"}})
        assert schema.get_option("exact").type == OptionType.BOOL

    def test_option_fields(self):
        option = _parse_option("sigma_vertical", {
            "key": "sigmaV",
            "type": "double",
            "min": -1,
            "max": 1024,
            "positional": True,
            "escape": True,
        })
        assert option.type == OptionType.FLOAT
        assert option.render_key == "sigmaV"
        assert option.positional
        assert option.escape

    def test_choice_mapping_kept(self):
        option = _parse_option("parity", {"type": "choice", "choices": {"top_field_first": "tff"}})
        assert option.choices == {"top_field_first": "tff"}

    def test_unknown_type(self):
        assert _parse_option("x", {"type": "matrix"}) is None

    def test_default_type_is_string(self):
        assert _parse_option("x", {}).type == OptionType.STRING


# ── Registration tests ────────────────────────────────────────────────

class TestRegistration:
    """Tests for loading catalogues into a registry."""

    def test_load_catalog_file_registers_aliases(self, tmp_path):
        registry = FilterRegistry()
        assert load_catalog_file(_write(tmp_path, VALID_CATALOG_YAML), registry) == 2
        assert registry.get("tblur").name == "test_blur"

    def test_load_catalog_dir(self, tmp_path):
        _write(tmp_path, VALID_CATALOG_YAML, "a.yaml")
        _write(tmp_path, "filters:\n  - name: other\n", "b.yml")
        _write(tmp_path, "ignored", "notes.txt")
        registry = FilterRegistry()
        assert load_catalog_dir(tmp_path, registry) == 3
        assert "other" in registry

    def test_missing_directory(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="ffexpr"):
            assert load_catalog_dir(tmp_path / "nope", FilterRegistry()) == 0
        assert "not found" in caplog.text

    def test_later_catalog_replaces_earlier(self, tmp_path):
        registry = FilterRegistry()
        load_catalog_file(_write(tmp_path, VALID_CATALOG_YAML, "a.yaml"), registry)
        load_catalog_file(
            _write(tmp_path, "filters:\n  - name: test_flip\n    description: Override\n", "b.yaml"),
            registry,
        )
        assert registry.get("test_flip").description == "Override"


class TestBuiltinCatalog:
    """Tests for the packaged catalogue."""

    def test_catalog_directory_ships_yaml(self):
        assert BUILTIN_CATALOG.is_dir()
        assert list(BUILTIN_CATALOG.glob("*.yaml"))

    def test_every_entry_loads(self):
        registry = FilterRegistry()
        loaded = load_builtin_catalog(registry)
        assert loaded == len(registry) >= 20
        for name in ("amplify", "avgblur", "gblur", "crop", "scale", "yadif", "drawtext"):
            assert name in registry

    def test_entries_have_known_categories(self):
        registry = FilterRegistry()
        load_builtin_catalog(registry)
        assert registry.list_by_category(FilterCategory.CUSTOM) == []
        for category in ("blur", "color", "spatial", "temporal", "analysis", "media"):
            assert registry.list_by_category(category)

    @pytest.mark.parametrize("alias, name", [
        ("gaussian_blur", "gblur"),
        ("resize", "scale"),
        ("deinterlace", "yadif"),
        ("mirror", "hflip"),
    ])
    def test_aliases(self, alias, name):
        registry = FilterRegistry()
        load_builtin_catalog(registry)
        assert registry.get(alias).name == name
