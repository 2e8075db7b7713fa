"""Process-wide configuration held in a context variable.

``get_config()`` returns the active ``ConfigData``. Tests swap it temporarily
with ``with_context``.
"""

import os
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from pathlib import Path

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.config.config_template import load_config


@dataclass
class AppContext:
    config: ConfigData


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context",
    default=AppContext(
        config=load_config(Path(os.getenv("APP_CONFIG_FILE", "config.yaml")))
    ),
)

# Computed fields are derived on validation and may read secrets
_COMPUTED = {"database": {"password", "connection_string"}}


def _deep_merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_config(base: ConfigData, override: ConfigData) -> ConfigData:
    """Overlay the fields explicitly set on ``override`` onto ``base``."""
    merged = _deep_merge(
        base.model_dump(exclude=_COMPUTED),
        override.model_dump(exclude_unset=True, exclude=_COMPUTED),
    )
    return ConfigData.model_validate(merged)


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily run with ``config_override`` merged into the active config.

    Example:
        override = ConfigData(catalog=CatalogConfig(visibility_key="shop_open"))
        with with_context(override):
            assert get_config().catalog.visibility_key == "shop_open"
            assert get_config().catalog.api_prefix == "/api/v1"  # inherited
    """
    if config_override is None:
        yield
        return

    current = _app_context.get()
    token = _app_context.set(
        replace(current, config=merge_config(current.config, config_override))
    )
    try:
        yield
    finally:
        _app_context.reset(token)


def get_config() -> ConfigData:
    return _app_context.get().config
