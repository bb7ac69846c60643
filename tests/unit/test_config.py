"""
Unit tests for keylib/config/runtime.py and keylib_cli/config.py
"""

from pathlib import Path

import pytest
import yaml

from keylib.config import (
    KeysConfig,
    OutputConfig,
    RuntimeConfig,
    get_default_config_template,
)
from keylib_cli.config import load_config


class TestRuntimeConfig:

    def test_defaults(self):
        config = RuntimeConfig()

        assert config.logging.level == "INFO"
        assert config.logging.file is None
        assert config.keys.default_key_type == "ed25519"
        assert config.keys.key_dir is None
        assert config.output.format == "human"
        assert config.output.indent == 2

    def test_from_dict_partial(self):
        config = RuntimeConfig.from_dict({"keys": {"default_key_type": "rsa"}})

        assert config.keys.default_key_type == "rsa"
        assert config.output.format == "human"

    def test_from_dict_null_sections(self):
        config = RuntimeConfig.from_dict({"logging": None, "output": None})

        assert config.logging.level == "INFO"
        assert config.output.indent == 2

    def test_invalid_key_type(self):
        with pytest.raises(ValueError):
            RuntimeConfig.from_dict({"keys": {"default_key_type": "dsa"}})

    def test_invalid_output_format(self):
        with pytest.raises(ValueError):
            OutputConfig(format="xml")

    def test_to_dict_round_trip(self):
        config = RuntimeConfig.from_dict({
            "logging": {"level": "DEBUG"},
            "keys": {"default_key_type": "rsa", "key_dir": "/keys"},
            "output": {"format": "json", "indent": 4},
        })

        assert RuntimeConfig.from_dict(config.to_dict()) == config


class TestEnvOverrides:

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("KEYLIB_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("KEYLIB_KEY_TYPE", "RSA")
        monkeypatch.setenv("KEYLIB_OUTPUT_FORMAT", "json")

        config = RuntimeConfig.from_env()

        assert config.logging.level == "DEBUG"
        assert config.keys.default_key_type == "rsa"
        assert config.output.format == "json"

    def test_no_overrides_returns_same_object(self):
        config = RuntimeConfig()

        assert config.with_env_overrides() is config

    def test_overrides_do_not_mutate_original(self, monkeypatch):
        config = RuntimeConfig.from_dict({"keys": {"key_dir": "/from/file"}})
        monkeypatch.setenv("KEYLIB_KEY_DIR", "/from/env")

        overridden = config.with_env_overrides()

        assert overridden.keys.key_dir == "/from/env"
        assert config.keys.key_dir == "/from/file"

    def test_invalid_env_value_rejected(self, monkeypatch):
        monkeypatch.setenv("KEYLIB_OUTPUT_FORMAT", "xml")

        with pytest.raises(ValueError):
            RuntimeConfig().with_env_overrides()


class TestYaml:

    def test_template_loads_to_defaults(self, tmp_path):
        path = tmp_path / "keylib.yaml"
        path.write_text(get_default_config_template())

        config = RuntimeConfig.from_yaml(path)

        assert config.to_dict() == RuntimeConfig().to_dict()

    def test_template_is_valid_yaml(self):
        data = yaml.safe_load(get_default_config_template())

        assert set(data) == {"logging", "keys", "output"}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert RuntimeConfig.from_yaml(path) == RuntimeConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuntimeConfig.from_yaml(tmp_path / "missing.yaml")


class TestKeysConfig:

    def test_resolve_relative_against_key_dir(self, tmp_path):
        keys = KeysConfig(key_dir=str(tmp_path))

        assert keys.resolve("alice.pub") == tmp_path / "alice.pub"

    def test_resolve_absolute_untouched(self, tmp_path):
        keys = KeysConfig(key_dir="/elsewhere")

        assert keys.resolve(tmp_path / "alice.pub") == tmp_path / "alice.pub"

    def test_resolve_without_key_dir(self):
        assert KeysConfig().resolve("alice.pub") == Path("alice.pub")


class TestLoadConfig:
    """Tests for keylib_cli.config.load_config()."""

    def test_no_files_uses_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert load_config() == RuntimeConfig()

    def test_discovers_cwd_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "keylib.yaml").write_text("keys:\n  default_key_type: rsa\n")

        assert load_config().keys.default_key_type == "rsa"

    def test_env_beats_file(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("output:\n  format: human\n")
        monkeypatch.setenv("KEYLIB_OUTPUT_FORMAT", "json")

        assert load_config(path).output.format == "json"

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")
