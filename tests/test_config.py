"""Tests for loading the YAML configuration."""

import logging

import pytest

from stdpaths.config import CONFIG_FILENAME, Config, find_config_file, load_config, resolve_config
from stdpaths.errors import ConfigError


def write_config(directory, text):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / CONFIG_FILENAME
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_values(self, tmp_path):
        path = write_config(tmp_path, "app_name: myapp\nverbose: true\n")
        assert load_config(path) == Config(app_name="myapp", verbose=True)

    def test_empty_file_gives_defaults(self, tmp_path):
        path = write_config(tmp_path, "")
        assert load_config(path) == Config()

    def test_unknown_key_warns(self, tmp_path, caplog):
        path = write_config(tmp_path, "app_name: myapp\ncolour: blue\n")
        with caplog.at_level(logging.WARNING, logger="stdpaths"):
            cfg = load_config(path)
        assert cfg.app_name == "myapp"
        assert "colour" in caplog.text

    def test_invalid_yaml(self, tmp_path):
        path = write_config(tmp_path, "app_name: [unclosed\n")
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_config(path)

    def test_top_level_must_be_mapping(self, tmp_path):
        path = write_config(tmp_path, "- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    @pytest.mark.parametrize("value", ["''", "42", "a/b"])
    def test_bad_app_name(self, tmp_path, value):
        path = write_config(tmp_path, f"app_name: {value}\n")
        with pytest.raises(ConfigError, match="app_name"):
            load_config(path)

    def test_bad_verbose(self, tmp_path):
        path = write_config(tmp_path, "verbose: sometimes\n")
        with pytest.raises(ConfigError, match="verbose"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="cannot read"):
            load_config(tmp_path / "nope.yml")


class TestFindConfig:
    def test_nothing_found(self, isolated_config):
        assert find_config_file() is None
        assert resolve_config() == Config()

    def test_user_config(self, isolated_config):
        cfg_home, _ = isolated_config
        path = write_config(cfg_home / "stdpaths", "app_name: fromhome\n")
        assert find_config_file() == path
        assert resolve_config().app_name == "fromhome"

    def test_system_config(self, isolated_config):
        _, sys_dir = isolated_config
        path = write_config(sys_dir / "stdpaths", "app_name: fromsystem\n")
        assert find_config_file() == path

    def test_user_config_wins(self, isolated_config):
        cfg_home, sys_dir = isolated_config
        write_config(sys_dir / "stdpaths", "app_name: fromsystem\n")
        write_config(cfg_home / "stdpaths", "app_name: fromhome\n")
        assert resolve_config().app_name == "fromhome"

    def test_explicit_path_wins(self, isolated_config, tmp_path):
        cfg_home, _ = isolated_config
        write_config(cfg_home / "stdpaths", "app_name: fromhome\n")
        explicit = write_config(tmp_path / "elsewhere", "app_name: explicit\n")
        assert resolve_config(str(explicit)).app_name == "explicit"


class TestConfigAppName:
    def test_missing_app_name_is_none(self, tmp_path):
        path = write_config(tmp_path, "verbose: false\n")
        assert load_config(path).app_name is None

    def test_null_app_name_is_none(self, tmp_path):
        path = write_config(tmp_path, "app_name: null\n")
        assert load_config(path).app_name is None

    def test_quoted_numeric_name(self, tmp_path):
        path = write_config(tmp_path, "app_name: '2024'\n")
        assert load_config(path).app_name == "2024"

    @pytest.mark.parametrize("value", ["'..'", "'.'", r"'a\b'", "../etc"])
    def test_escaping_names_rejected(self, tmp_path, value):
        path = write_config(tmp_path, f"app_name: {value}\n")
        with pytest.raises(ConfigError, match="plain directory name"):
            load_config(path)
