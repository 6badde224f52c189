"""
Configuration - defaults, config file loading and command line overrides

The config file is JSON (`.marklint.json`) or YAML when its suffix is
.yaml/.yml. Keys are camelCase:

    {
      "minHeadingLevel": 2,
      "enableLinkCheck": false,
      "linkCheckTimeoutSeconds": 5,
      "skipLinkPatterns": [],
      "include": ["README.md"],
      "ignore": [],
      "output": "text",
      ...
    }
"""

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from marklint.errors import ConfigError

DEFAULT_CONFIG_PATH = ".marklint.json"

OUTPUT_FORMATS = ("text", "json")

# dataclass field -> config file key
CONFIG_KEYS: dict[str, str] = {
    "min_heading_level": "minHeadingLevel",
    "enable_link_check": "enableLinkCheck",
    "link_check_timeout_seconds": "linkCheckTimeoutSeconds",
    "skip_link_patterns": "skipLinkPatterns",
    "include": "include",
    "ignore": "ignore",
    "output": "output",
    "enable_duplicate_heading_check": "enableDuplicateHeadingCheck",
    "enable_heading_level_check": "enableHeadingLevelCheck",
    "enable_no_multiple_blank_lines_check": "enableNoMultipleBlankLinesCheck",
    "enable_no_setext_headings_check": "enableNoSetextHeadingsCheck",
    "enable_final_blank_line_check": "enableFinalBlankLineCheck",
    "enable_unclosed_code_block_check": "enableUnclosedCodeBlockCheck",
    "enable_empty_alt_text_check": "enableEmptyAltTextCheck",
}


@dataclass
class LintConfig:
    """
    Lint options

    Attributes:
        min_heading_level: expected level of the first heading
        enable_link_check: verify external links over the network
        link_check_timeout_seconds: per-request timeout
        skip_link_patterns: regexes of URLs never checked
        include: paths linted when none are given on the command line
        ignore: gitignore-style patterns of files to leave out
        output: report format, text or json
    """
    min_heading_level: int = 2
    enable_link_check: bool = False
    link_check_timeout_seconds: int = 5
    skip_link_patterns: list[str] = field(default_factory=list)
    include: list[str] = field(default_factory=lambda: ["README.md"])
    ignore: list[str] = field(default_factory=list)
    output: str = "text"
    enable_duplicate_heading_check: bool = True
    enable_heading_level_check: bool = True
    enable_no_multiple_blank_lines_check: bool = True
    enable_no_setext_headings_check: bool = True
    enable_final_blank_line_check: bool = True
    enable_unclosed_code_block_check: bool = True
    enable_empty_alt_text_check: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Serialize with config file keys."""
        return {
            CONFIG_KEYS[f.name]: getattr(self, f.name)
            for f in fields(self)
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LintConfig":
        """
        Build a config from config file keys.

        Keys that are absent keep their defaults; unknown keys are rejected.

        Raises:
            ConfigError: on unknown keys
        """
        by_key = {key: name for name, key in CONFIG_KEYS.items()}
        unknown = sorted(k for k in data if k not in by_key)
        if unknown:
            raise ConfigError(f"unknown config field(s): {', '.join(unknown)}")

        config = cls(**{by_key[k]: v for k, v in data.items()})
        if not config.output:
            config.output = "text"
        return config


def load_config(path: str | Path) -> LintConfig:
    """
    Load a config file.

    Args:
        path: JSON file, or YAML for .yaml/.yml

    Returns:
        LintConfig

    Raises:
        ConfigError: unreadable file, invalid syntax or unknown keys
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"failed to read config file: {e}") from e

    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text) or {}
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"failed to parse config file: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError("failed to parse config file: top level must be an object")

    return LintConfig.from_dict(data)


def load_or_default(path: str | Path) -> LintConfig:
    """Load the config file if it exists, otherwise return the defaults."""
    if not Path(path).exists():
        return LintConfig()
    return load_config(path)


def merge_overrides(config: LintConfig, **overrides: Any) -> LintConfig:
    """
    Apply command line values on top of a config.

    Only values that were actually given (not None) override the config.
    """
    given = {name: value for name, value in overrides.items() if value is not None}
    return replace(config, **given)


def validate_config(config: LintConfig) -> None:
    """
    Check config values.

    Raises:
        ConfigError: on the first invalid value
    """
    if config.output not in OUTPUT_FORMATS:
        raise ConfigError(
            f"invalid output format: {config.output!r} (must be 'text' or 'json')"
        )
    if not 1 <= config.min_heading_level <= 6:
        raise ConfigError(
            f"invalid minHeadingLevel: {config.min_heading_level} (must be between 1 and 6)"
        )
    if config.link_check_timeout_seconds <= 0:
        raise ConfigError(
            f"invalid linkCheckTimeoutSeconds: {config.link_check_timeout_seconds} (must be positive)"
        )


def write_default_config(path: str | Path = DEFAULT_CONFIG_PATH) -> Path:
    """
    Write the default config as JSON.

    Raises:
        ConfigError: the file already exists or cannot be written
    """
    path = Path(path)
    if path.exists():
        raise ConfigError(f"{path} already exists")
    try:
        path.write_text(json.dumps(LintConfig().to_dict(), indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"failed to write config file: {e}") from e
    return path
