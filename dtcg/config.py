"""
Converter configuration.

Optional YAML file, e.g.:

    output_dir: build/tokens
    union: false
    indent: 4
"""

from dataclasses import dataclass
from pathlib import Path

import yaml

from dtcg.exceptions import ConfigError

DEFAULT_OUTPUT_DIR = "output"


@dataclass
class ConverterConfig:
    """Settings for a conversion run."""

    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    union: bool = True
    indent: int = 2


def load_config(config_path: Path) -> ConverterConfig:
    """Load a YAML config file, falling back to defaults for absent keys."""
    if not config_path.exists():
        raise ConfigError(config_path, "file not found")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(config_path, str(exc)) from exc

    if data is None:
        return ConverterConfig()
    if not isinstance(data, dict):
        raise ConfigError(config_path, "expected a mapping at the top level")

    unknown = sorted(set(data) - {"output_dir", "union", "indent"})
    if unknown:
        raise ConfigError(config_path, f"unknown keys: {', '.join(map(str, unknown))}")

    config = ConverterConfig()

    if "output_dir" in data:
        if not isinstance(data["output_dir"], str):
            raise ConfigError(config_path, "output_dir must be a string")
        config.output_dir = Path(data["output_dir"])

    if "union" in data:
        if not isinstance(data["union"], bool):
            raise ConfigError(config_path, "union must be true or false")
        config.union = data["union"]

    if "indent" in data:
        indent = data["indent"]
        if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
            raise ConfigError(config_path, "indent must be a non-negative integer")
        config.indent = indent

    return config
