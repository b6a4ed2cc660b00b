"""Tests for configuration loading."""

import json
from pathlib import Path

from pydantic import ValidationError
import pytest

from springr.core.config.loader import (
    LOG_LEVEL_ENV_VAR,
    detect_format,
    load_app_config,
    load_config,
)
from springr.core.config.models import AppConfig

YAML_CONFIG = """
logging:
  level: DEBUG
search:
  precision: 0.05
  max_iterations: 500
visualization:
  width: 80
presets:
  bouncy:
    settings:
      overshoot: 0.5
      rest_position_runs: 6
    duration_ms: 3000
"""


class TestDetectFormat:
    """Tests for detect_format."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("a.json", "json"), ("a.yaml", "yaml"), ("a.YML", "yaml")],
    )
    def test_known_suffixes(self, name: str, expected: str) -> None:
        """Test supported suffixes are detected case-insensitively."""
        assert detect_format(name) == expected

    def test_unknown_suffix_raises(self) -> None:
        """Test unsupported suffix raises ValueError."""
        with pytest.raises(ValueError, match="Unsupported config format"):
            detect_format("config.toml")


class TestLoadConfig:
    """Tests for load_config."""

    def test_loads_yaml(self, tmp_path: Path) -> None:
        """Test YAML files load into a dict."""
        path = tmp_path / "springr.yaml"
        path.write_text(YAML_CONFIG, encoding="utf-8")

        raw = load_config(path)
        assert raw["search"]["precision"] == 0.05

    def test_loads_json(self, tmp_path: Path) -> None:
        """Test JSON files load into a dict."""
        path = tmp_path / "springr.json"
        path.write_text(json.dumps({"diagnostics": {"samples": 200}}), encoding="utf-8")

        assert load_config(path) == {"diagnostics": {"samples": 200}}

    def test_empty_yaml_is_empty_dict(self, tmp_path: Path) -> None:
        """Test an empty YAML file loads as {}."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == {}

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        """Test malformed JSON raises ValueError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Test malformed YAML raises ValueError."""
        path = tmp_path / "bad.yaml"
        path.write_text("search: [unclosed", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_root_raises(self, tmp_path: Path) -> None:
        """Test a list at the root is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping"):
            load_config(path)


class TestLoadAppConfig:
    """Tests for load_app_config."""

    def test_defaults_without_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test defaults are used when no default config file exists."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)

        config = load_app_config()
        assert config == AppConfig()

    def test_reads_default_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test springr.yaml in the working directory is picked up."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
        (tmp_path / "springr.yaml").write_text(YAML_CONFIG, encoding="utf-8")

        config = load_app_config()
        assert config.search.max_iterations == 500

    def test_explicit_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test an explicit path is validated into AppConfig."""
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
        path = tmp_path / "custom.yaml"
        path.write_text(YAML_CONFIG, encoding="utf-8")

        config = load_app_config(path)

        assert config.logging.level == "DEBUG"
        assert config.search.precision == 0.05
        assert config.visualization.width == 80
        assert config.visualization.interval_ms == 32
        assert config.get_preset("bouncy").settings.rest_position_runs == 6

    def test_explicit_missing_path_raises(self, tmp_path: Path) -> None:
        """Test an explicit missing path is an error, not a silent default."""
        with pytest.raises(FileNotFoundError):
            load_app_config(tmp_path / "missing.yaml")

    def test_invalid_values_raise(self, tmp_path: Path) -> None:
        """Test invalid config values raise ValidationError."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"search": {"precision": -1}}), encoding="utf-8")

        with pytest.raises(ValidationError):
            load_app_config(path)

    def test_env_overrides_log_level(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test SPRINGR_LOG_LEVEL overrides the configured level."""
        path = tmp_path / "custom.yaml"
        path.write_text(YAML_CONFIG, encoding="utf-8")
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "warning")

        assert load_app_config(path).logging.level == "WARNING"

    def test_env_invalid_log_level_raises(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test an unknown level from the environment is rejected."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")

        with pytest.raises(ValidationError):
            load_app_config()
