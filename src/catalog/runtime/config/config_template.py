"""Load ``config.yaml`` with environment placeholders resolved.

Placeholders take three forms: ``${NAME}`` must be set, ``${NAME:-fallback}``
falls back to ``fallback`` and ``${NAME:?hint}`` fails with ``hint``.
"""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from src.catalog.runtime.config.config_data import ConfigData

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def _resolve(match: re.Match) -> str:
    expression = match.group(1)

    if ":-" in expression:
        name, fallback = expression.split(":-", 1)
        return os.getenv(name, fallback)

    name, _, hint = expression.partition(":?")
    value = os.getenv(name)
    if value is not None:
        return value
    if hint:
        raise ValueError(f"Required environment variable {name}: {hint}")
    raise ValueError(f"Required environment variable {name} not set")


def substitute_env_vars(text: str) -> str:
    """Replace every ``${...}`` placeholder in ``text`` from the environment."""
    return _PLACEHOLDER.sub(_resolve, text)


def apply_environment_overrides(environment: str) -> list[str]:
    """Copy ``<ENVIRONMENT>_NAME`` variables onto ``NAME``.

    Returns the names that were overridden.
    """
    prefix = f"{environment.upper()}_"
    overridden = []
    for name, value in list(os.environ.items()):
        if name.startswith(prefix) and len(name) > len(prefix):
            target = name[len(prefix):]
            os.environ[target] = value
            overridden.append(target)
    return overridden


def load_templated_yaml(file_path: Path) -> ConfigData:
    """
    Read ``file_path``, resolve its placeholders and validate the ``config`` section.

    Raises:
        ValueError: If a required variable is missing, the YAML is malformed
            or empty, or the values do not validate.
    """
    environment = os.getenv("APP_ENVIRONMENT", "development")
    overridden = apply_environment_overrides(environment)
    logger.bind(environment=environment, overrides=overridden).info(
        "Loading configuration from {}", file_path
    )

    text = substitute_env_vars(file_path.read_text())

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not document:
        raise ValueError("Failed to parse YAML")

    try:
        return ConfigData.model_validate(document.get("config") or {})
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def load_config(file_path: Path) -> ConfigData:
    """Load configuration from ``file_path``, falling back to defaults when absent."""
    if not file_path.exists():
        logger.warning("Configuration file {} not found; using defaults", file_path)
        return ConfigData()
    return load_templated_yaml(file_path)
