"""Configuration loader for the lesson lint tool."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Generic containers and inline elements that carry no semantic meaning of
# their own. References to them are neither reported nor required.
DEFAULT_IGNORED_TAGS: list[str] = [
    "a", "abbr", "b", "blockquote", "body", "br", "button", "caption",
    "code", "dd", "div", "dl", "dt", "em", "form", "h1", "h2", "h3", "h4",
    "h5", "h6", "head", "hr", "html", "i", "iframe", "img", "input", "label",
    "li", "link", "meta", "ol", "option", "p", "pre", "script", "select",
    "small", "source", "span", "strong", "style", "sub", "summary", "sup",
    "table", "tbody", "td", "textarea", "th", "thead", "title", "tr", "u",
    "ul", "video", "audio", "canvas",
]


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Lesson Lint"
    version: str = "1.0.0"
    log_level: str = "WARNING"


class LoadingConfig(BaseModel):
    """Lesson file loading configuration."""

    encoding: str = "utf-8"
    detect_encoding: bool = True
    min_confidence: float = 0.7
    parse_front_matter: bool = True


class ParsingConfig(BaseModel):
    """Section parsing configuration."""

    headings_close_fences: bool = True


class ValidationConfig(BaseModel):
    """Element reference validation configuration."""

    glossary_path: str | None = None
    ignored_tags: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORED_TAGS))


class BatchConfig(BaseModel):
    """Multi-document processing configuration."""

    max_workers: int = 4


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    loading: LoadingConfig = Field(default_factory=LoadingConfig)
    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file, encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Environment overrides
    log_level = os.getenv("LESSON_LINT_LOG_LEVEL")
    if log_level:
        config.app.log_level = log_level.upper()
    glossary_path = os.getenv("LESSON_LINT_GLOSSARY")
    if glossary_path:
        config.validation.glossary_path = glossary_path

    return config
