"""Tests for configuration loading."""

import logging

import pytest
import yaml

from ffexpr.config import Config, default_path


class TestConfig:
    """Tests for Config."""

    def test_defaults(self):
        config = Config()
        assert config.catalog_dirs == []
        assert config.include_builtin_catalog is True
        assert config.log_level == "WARNING"

    def test_missing_file_gives_defaults(self, tmp_path):
        assert Config.load(tmp_path / "missing.yaml") == Config()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "config.yaml"
        Config(catalog_dirs=["/opt/filters"], include_builtin_catalog=False, log_level="DEBUG").save(path)

        loaded = Config.load(path)
        assert loaded.catalog_dirs == ["/opt/filters"]
        assert loaded.include_builtin_catalog is False
        assert loaded.log_level == "DEBUG"

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"log_level": "INFO", "theme": "dark"}))
        assert Config.load(path).log_level == "INFO"

    def test_single_directory_becomes_list(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("catalog_dirs: /srv/catalog\n")
        assert Config.load(path).catalog_dirs == ["/srv/catalog"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert Config.load(path) == Config()

    @pytest.mark.parametrize("content", ["- a\n- b\n", "just text\n", "42\n"])
    def test_non_mapping_gives_defaults(self, tmp_path, caplog, content):
        path = tmp_path / "config.yaml"
        path.write_text(content)
        with caplog.at_level(logging.WARNING, logger="ffexpr"):
            assert Config.load(path) == Config()
        assert "expected a mapping" in caplog.text

    def test_environment_variable(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("log_level: ERROR\n")
        monkeypatch.setenv("FFEXPR_CONFIG", str(path))
        assert default_path() == path
        assert Config.load().log_level == "ERROR"

    def test_home_fallback(self, monkeypatch):
        monkeypatch.delenv("FFEXPR_CONFIG", raising=False)
        assert default_path().parts[-3:] == (".config", "ffexpr", "config.yaml")

    def test_apply_logging(self):
        logger = logging.getLogger("ffexpr")
        previous = logger.level
        try:
            Config(log_level="debug").apply_logging()
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)
