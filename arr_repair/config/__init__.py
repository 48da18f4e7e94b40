"""Configuration management for Arr Repair."""

from .config import (
    SERVER_TYPE_RADARR,
    SERVER_TYPE_SONARR,
    SERVER_TYPES,
    ArrRepairConfig,
    WaitPolicy,
)
from .defaults import create_default_config, load_config_from_env

__all__ = [
    "ArrRepairConfig",
    "WaitPolicy",
    "SERVER_TYPE_SONARR",
    "SERVER_TYPE_RADARR",
    "SERVER_TYPES",
    "create_default_config",
    "load_config_from_env",
]
