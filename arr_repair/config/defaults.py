"""Default configuration values for Arr Repair."""

import os

from arr_repair.exceptions import ConfigError

from .config import ArrRepairConfig

# Environment variable -> (config field, converter)
ENV_VARIABLES = {
    "ARR_URL": ("server_url", str),
    "ARR_API_KEY": ("api_key", str),
    "ARR_TYPE": ("server_type", str),
    "ARR_DOWNLOAD_FOLDER": ("download_folder", str),
    "ARR_POLL_INTERVAL": ("poll_interval", float),
    "ARR_MAX_WAIT": ("max_wait", float),
    "ARR_RETRIES": ("command_retries", int),
}


def create_default_config(**overrides) -> ArrRepairConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        ArrRepairConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            server_type="radarr",
            command_retries=5
        )
    """
    return ArrRepairConfig(**overrides)


def load_config_from_env(environ=None, **overrides) -> ArrRepairConfig:
    """Create a configuration from ARR_* environment variables.

    Explicit overrides (typically command-line arguments) win over the
    environment. Overrides set to None are ignored.

    Raises:
        ConfigError: If a numeric variable cannot be parsed
    """
    environ = os.environ if environ is None else environ
    values = {}
    for variable, (name, convert) in ENV_VARIABLES.items():
        raw = environ.get(variable)
        if raw is None or raw == "":
            continue
        try:
            values[name] = convert(raw)
        except ValueError as e:
            raise ConfigError(f"Invalid value for {variable}: {raw!r}") from e

    values.update({key: value for key, value in overrides.items() if value is not None})
    return create_default_config(**values)
