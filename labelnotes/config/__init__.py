"""Configuration module."""

from .settings import (
    CategoryRule,
    Config,
    ReleaseConfig,
    REQUIRED_ENV_VARS,
    create_sample_config,
    get_config,
    load_release_config,
)

__all__ = [
    "CategoryRule",
    "Config",
    "ReleaseConfig",
    "REQUIRED_ENV_VARS",
    "create_sample_config",
    "get_config",
    "load_release_config",
]
