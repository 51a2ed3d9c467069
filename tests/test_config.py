"""Tests for the configuration layer."""

import json
import logging

import pytest

from validated_primitives.config import (
    EnvConfigSource,
    FileConfigSource,
    ValidatorConfig,
    configure,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from validated_primitives.exceptions import ConfigSourceError, ConfigValidationError


class TestValidatorConfig:
    """Tests for ValidatorConfig."""

    def test_defaults(self):
        config = ValidatorConfig()
        assert config.max_input_length == 1024
        assert config.log_failures is False
        assert config.strict_ip_v4 is True

    @pytest.mark.parametrize("value", [0, -1])
    def test_rejects_non_positive_length(self, value):
        with pytest.raises(ValueError):
            ValidatorConfig(max_input_length=value)

    def test_replace_returns_new_instance(self):
        config = ValidatorConfig()
        updated = config.replace(max_input_length=10)
        assert updated.max_input_length == 10
        assert config.max_input_length == 1024

    def test_from_kwargs_ignores_unknown_keys(self):
        config = ValidatorConfig.from_kwargs(log_failures=True, colour="blue")
        assert config.log_failures is True


class TestGlobalConfig:
    """Tests for the process-wide configuration."""

    def test_configure_and_reset(self):
        configure(max_input_length=64)
        assert get_config().max_input_length == 64
        reset_config()
        assert get_config() == ValidatorConfig()

    def test_set_config_returns_previous(self):
        previous = set_config(ValidatorConfig(log_failures=True))
        assert previous == ValidatorConfig()
        assert get_config().log_failures is True


class TestConfigSources:
    """Tests for file and environment sources."""

    def test_env_source(self, monkeypatch):
        monkeypatch.setenv("VALIDATED_PRIMITIVES_MAX_INPUT_LENGTH", "2048")
        monkeypatch.setenv("VALIDATED_PRIMITIVES_LOG_FAILURES", "yes")
        values = EnvConfigSource().load()
        assert values["max_input_length"] == 2048
        assert values["log_failures"] is True

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "primitives.yaml"
        path.write_text("validated_primitives:\n  max_input_length: 300\n  strict_ip_v4: false\n")
        config = load_config(path)
        assert config.max_input_length == 300
        assert config.strict_ip_v4 is False

    def test_json_file(self, tmp_path):
        path = tmp_path / "primitives.json"
        path.write_text(json.dumps({"max_input_length": 250}))
        assert load_config(path).max_input_length == 250

    def test_toml_file(self, tmp_path):
        path = tmp_path / "primitives.toml"
        path.write_text("[validated_primitives]\nlog_failures = true\n")
        assert load_config(path).log_failures is True

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "primitives.yaml"
        path.write_text("max_input_length: 300\n")
        monkeypatch.setenv("VALIDATED_PRIMITIVES_MAX_INPUT_LENGTH", "400")
        assert load_config(path).max_input_length == 400

    def test_missing_required_file(self, tmp_path):
        with pytest.raises(ConfigSourceError):
            load_config(tmp_path / "missing.yaml")

    def test_missing_optional_file(self, tmp_path):
        assert FileConfigSource(tmp_path / "missing.yaml").load() == {}

    def test_unreadable_optional_file_logs_warning(self, tmp_path, caplog):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="validated_primitives.config"):
            assert FileConfigSource(path).load() == {}
        assert "broken.json" in caplog.text

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "primitives.ini"
        path.write_text("[x]")
        with pytest.raises(ConfigSourceError):
            FileConfigSource(path).load()

    def test_invalid_type(self, tmp_path):
        path = tmp_path / "primitives.yaml"
        path.write_text("max_input_length: lots\n")
        with pytest.raises(ConfigValidationError):
            load_config(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "primitives.yaml"
        path.write_text("max_input_length: -1\n")
        with pytest.raises(ConfigValidationError):
            load_config(path)
