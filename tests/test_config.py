"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from src.config import DEFAULT_IGNORED_TAGS, AppConfig, load_config

PROJECT_CONFIG = Path(__file__).parent.parent / "config.yaml"


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LESSON_LINT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LESSON_LINT_GLOSSARY", raising=False)


class TestAppConfigDefaults:
    """Test that AppConfig provides sensible defaults."""

    def test_default_config_creates_successfully(self) -> None:
        config = AppConfig()
        assert config.app.name == "Lesson Lint"
        assert config.app.log_level == "WARNING"

    def test_default_loading_config(self) -> None:
        config = AppConfig()
        assert config.loading.encoding == "utf-8"
        assert config.loading.detect_encoding is True
        assert config.loading.min_confidence == 0.7
        assert config.loading.parse_front_matter is True

    def test_default_parsing_config(self) -> None:
        assert AppConfig().parsing.headings_close_fences is True

    def test_default_validation_config(self) -> None:
        config = AppConfig()
        assert config.validation.glossary_path is None
        assert config.validation.ignored_tags == DEFAULT_IGNORED_TAGS
        assert "div" in config.validation.ignored_tags
        assert "header" not in config.validation.ignored_tags

    def test_ignored_tags_not_shared_between_instances(self) -> None:
        first = AppConfig()
        first.validation.ignored_tags.append("widget")
        assert "widget" not in AppConfig().validation.ignored_tags

    def test_default_batch_config(self) -> None:
        assert AppConfig().batch.max_workers == 4


class TestLoadConfig:
    """Test loading config from YAML files."""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        yaml_data = {
            "app": {"name": "Test Lint", "log_level": "DEBUG"},
            "parsing": {"headings_close_fences": False},
        }
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump(yaml_data))

        config = load_config(config_file)
        assert config.app.name == "Test Lint"
        assert config.app.log_level == "DEBUG"
        assert config.parsing.headings_close_fences is False
        # Other fields keep defaults
        assert config.loading.encoding == "utf-8"

    def test_empty_ignored_tags_override(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("validation:\n  ignored_tags: []\n")

        config = load_config(config_file)
        assert config.validation.ignored_tags == []

    def test_load_missing_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.app.name == "Lesson Lint"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        assert load_config(config_file).batch.max_workers == 4

    def test_env_vars_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("{}")

        monkeypatch.setenv("LESSON_LINT_LOG_LEVEL", "info")
        monkeypatch.setenv("LESSON_LINT_GLOSSARY", "/tmp/glossary.yaml")

        config = load_config(config_file)
        assert config.app.log_level == "INFO"
        assert config.validation.glossary_path == "/tmp/glossary.yaml"

    def test_load_project_config_yaml(self) -> None:
        """Test loading the actual project config.yaml."""
        config = load_config(PROJECT_CONFIG)
        assert config.app.name == "Lesson Lint"
        assert config.validation.glossary_path is None
        assert config.batch.max_workers == 4
