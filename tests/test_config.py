"""Tests for config discovery, loading, saving and precedence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from querent.config import (
    CONFIG_FILENAMES,
    find_config_file,
    get_data_dir,
    load_config,
    resolve_config,
    save_config,
    starter_config,
)
from querent.exceptions import ConfigError
from querent.exit_codes import EXIT_CONFIG_ERROR
from querent.models import ApplicationModule, LibraryModule, ProjectConfig


# ------------------------------------------------------------------ #
# Discovery
# ------------------------------------------------------------------ #


class TestFindConfigFile:

    def test_none_found(self, tmp_path):
        assert find_config_file(tmp_path) is None

    def test_priority_order(self, tmp_path):
        for name in reversed(CONFIG_FILENAMES):
            (tmp_path / name).write_text("{}")
            assert find_config_file(tmp_path) == tmp_path / name

    def test_directories_ignored(self, tmp_path):
        (tmp_path / "querent.yaml").mkdir()
        assert find_config_file(tmp_path) is None


# ------------------------------------------------------------------ #
# Loading
# ------------------------------------------------------------------ #


class TestLoadConfig:

    def test_yaml(self, write_config, sample_config):
        config = load_config(write_config(sample_config(build_profile=True)))
        assert isinstance(config.android, ApplicationModule)
        assert config.android.namespace == "com.example.app"
        assert config.querent.build_features.build_profile is True
        assert config.querent.build_features.xml_resources is False
        assert [loc.tag for loc in config.querent.languages_schema_options.supported_locales] == [
            "ro-RO",
            "ja",
        ]

    def test_json(self, tmp_path, sample_config):
        path = tmp_path / "querent.json"
        path.write_text(json.dumps(sample_config(languages_schema=True)))
        config = load_config(path)
        assert config.querent.build_features.languages_schema is True

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "querent.yaml"
        path.write_text("")
        assert load_config(path) == ProjectConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found") as excinfo:
            load_config(tmp_path / "nope.yaml")
        assert excinfo.value.exit_code == EXIT_CONFIG_ERROR

    def test_unparseable_yaml(self, tmp_path):
        path = tmp_path / "querent.yaml"
        path.write_text("android: [unclosed\n")
        with pytest.raises(ConfigError, match="Cannot read config"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "querent.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="expected a mapping"):
            load_config(path)

    def test_malformed_locale(self, write_config, sample_config):
        data = sample_config()
        data["querent"]["languages_schema_options"]["default_locale"] = "english"
        with pytest.raises(ConfigError, match="Invalid locale identifier"):
            load_config(write_config(data))

    def test_unknown_module_kind(self, write_config, sample_config):
        data = sample_config()
        data["android"]["kind"] = "wear"
        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(write_config(data))


# ------------------------------------------------------------------ #
# Saving and starter documents
# ------------------------------------------------------------------ #


class TestSaveConfig:

    def test_yaml_round_trip(self, tmp_path, sample_config):
        path = tmp_path / "querent.yaml"
        save_config(sample_config(xml_resources=True), path)
        assert yaml.safe_load(path.read_text())["android"]["namespace"] == "com.example.app"
        assert load_config(path).querent.build_features.xml_resources is True

    def test_json(self, tmp_path, sample_config):
        path = tmp_path / "querent.json"
        save_config(sample_config(), path)
        assert json.loads(path.read_text())["querent"]["build_features"]["build_profile"] is False
        assert path.read_text().endswith("\n")

    def test_invalid_refused(self, tmp_path):
        path = tmp_path / "querent.yaml"
        with pytest.raises(ConfigError, match="Refusing to write"):
            save_config({"android": {"kind": "nope"}}, path)
        assert not path.exists()


class TestStarterConfig:

    def test_application(self):
        data = starter_config("com.example.app")
        config = ProjectConfig.model_validate(data)
        assert isinstance(config.android, ApplicationModule)
        assert config.android.default_config.application_id == "com.example.app"
        features = config.querent.build_features
        assert features.build_profile and features.xml_resources and features.languages_schema

    def test_library_has_no_application_id(self):
        data = starter_config("com.example.lib", kind="library")
        assert "application_id" not in data["android"]["default_config"]
        assert isinstance(ProjectConfig.model_validate(data).android, LibraryModule)


# ------------------------------------------------------------------ #
# Precedence
# ------------------------------------------------------------------ #


class TestResolveConfig:

    def test_defaults_without_file(self, isolated_env):
        config, path = resolve_config(isolated_env)
        assert path is None
        assert config == ProjectConfig()

    def test_discovered_file(self, isolated_env, write_config, sample_config):
        written = write_config(sample_config(build_profile=True))
        config, path = resolve_config(isolated_env)
        assert path == written
        assert config.querent.build_features.build_profile is True

    def test_env_config_overrides_discovery(
        self, isolated_env, write_config, sample_config, monkeypatch
    ):
        write_config(sample_config())
        write_config(sample_config(xml_resources=True), name="other.yaml")
        monkeypatch.setenv("QUERENT_CONFIG", "other.yaml")
        config, path = resolve_config(isolated_env)
        assert path == isolated_env / "other.yaml"
        assert config.querent.build_features.xml_resources is True

    def test_cli_config_overrides_env(self, isolated_env, write_config, sample_config, monkeypatch):
        write_config(sample_config(xml_resources=True), name="env.yaml")
        cli = write_config(sample_config(languages_schema=True), name="cli.yaml")
        monkeypatch.setenv("QUERENT_CONFIG", "env.yaml")
        config, path = resolve_config(isolated_env, cli_config=cli)
        assert path == cli
        assert config.querent.build_features.languages_schema is True
        assert config.querent.build_features.xml_resources is False

    def test_explicit_missing_file(self, isolated_env):
        with pytest.raises(ConfigError, match="not found"):
            resolve_config(isolated_env, cli_config=Path("missing.yaml"))

    def test_output_dir_precedence(self, isolated_env, write_config, sample_config, monkeypatch):
        data = sample_config()
        data["querent"]["output_dir"] = "from-file"
        write_config(data)

        config, _ = resolve_config(isolated_env)
        assert config.querent.output_dir == "from-file"

        monkeypatch.setenv("QUERENT_OUTPUT_DIR", "from-env")
        config, _ = resolve_config(isolated_env)
        assert config.querent.output_dir == "from-env"

        config, _ = resolve_config(isolated_env, cli_output_dir=Path("from-cli"))
        assert config.querent.output_dir == "from-cli"


class TestDataDir:

    def test_xdg_data_home(self, isolated_env, monkeypatch):
        monkeypatch.setattr("querent.config._is_xdg_platform", lambda: True)
        data_dir = get_data_dir()
        assert data_dir == isolated_env / "data" / "querent"
        assert data_dir.is_dir()
