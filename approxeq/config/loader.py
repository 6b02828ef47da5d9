from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from beartype import beartype
from yaml import MappingNode, ScalarNode
from yaml.loader import SafeLoader

ENV_VAR_PATTERN: re.Pattern[str] = re.compile(r"\$\{([^}^{]+)\}")


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


def expand_env_vars(value: str) -> str:
    """Replace each ``${VAR}`` with the variable's value, or an empty string when unset."""
    return ENV_VAR_PATTERN.sub(lambda match: os.environ.get(match.group(1), ""), value)


class EnvVarLoader(SafeLoader):
    """YAML safe loader that expands ``${VAR}`` inside string scalars."""

    def construct_scalar(self, node: ScalarNode | MappingNode) -> str:
        value = super().construct_scalar(node)
        return expand_env_vars(value) if isinstance(value, str) else value


@beartype
def load_from_yaml(path: str | Path) -> dict[str, object]:
    """
    Load a UTF-8 YAML config file whose root is a mapping.

    Raises:
        ConfigError: If the file is missing, not valid UTF-8, not valid YAML,
            or its root is not a mapping.
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        text = config_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as err:
        raise ConfigError(f"Config file is not valid UTF-8: {config_path}") from err

    try:
        data = yaml.load(text, Loader=EnvVarLoader)
    except yaml.YAMLError as err:
        raise ConfigError(f"YAML parsing error: {err}") from err

    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping (dict).")
    return data
