"""
Configuration for the intcalc shell.

Settings live in the ``[repl]`` table of an ``intcalc.toml`` file:

    [repl]
    prompt = "calc> "
    banner = "Welcome to calc!"
    show_ast = true
    log_level = "INFO"

The INTCALC_LOG_LEVEL environment variable overrides ``log_level``.

Usage:
    from intcalc.core.config import load_config

    config = load_config(Path("intcalc.toml"))
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from intcalc.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "intcalc.toml"

# Environment variable name
LOG_LEVEL_ENV_VAR = "INTCALC_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ReplConfig:
    """Shell configuration."""

    prompt: str = ">>> "
    banner: str = "Welcome to calc!"
    show_ast: bool = False  # Print the rendered AST before each result
    log_level: str = "WARNING"


# Expected TOML value type of each [repl] setting
_SETTING_TYPES: dict[str, type] = {
    "prompt": str,
    "banner": str,
    "show_ast": bool,
    "log_level": str,
}


def load_config(path: Path | None = None) -> ReplConfig:
    """Load shell configuration from an intcalc.toml file.

    Args:
        path: Config file. None or a missing file means defaults.

    Returns:
        ReplConfig with the environment override applied.

    Raises:
        ConfigError: If the file is not valid TOML, or [repl] is not a table
            of correctly typed settings.
    """
    data: dict = {}
    if path is not None and path.exists():
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e
        logger.debug("Loaded config from %s", path)

    repl = data.get("repl", {})
    if not isinstance(repl, dict):
        raise ConfigError(f"Invalid config file {path}: [repl] must be a table")

    for key, expected in _SETTING_TYPES.items():
        if key in repl and not isinstance(repl[key], expected):
            raise ConfigError(
                f"Invalid config file {path}: repl.{key} must be {expected.__name__}, "
                f"got {type(repl[key]).__name__}"
            )

    defaults = ReplConfig()
    config = ReplConfig(
        prompt=repl.get("prompt", defaults.prompt),
        banner=repl.get("banner", defaults.banner),
        show_ast=repl.get("show_ast", defaults.show_ast),
        log_level=repl.get("log_level", defaults.log_level).upper(),
    )
    config.log_level = resolve_log_level(config.log_level)
    return config


def resolve_log_level(configured: str) -> str:
    """Apply the INTCALC_LOG_LEVEL override to a configured level.

    Unknown values, from either source, fall back with a warning.

    Examples:
        >>> import os
        >>> os.environ["INTCALC_LOG_LEVEL"] = "debug"
        >>> resolve_log_level("WARNING")
        'DEBUG'
    """
    env_value = os.environ.get(LOG_LEVEL_ENV_VAR, "").upper().strip()

    if env_value in _LOG_LEVELS:
        return env_value
    if env_value:
        logger.warning(
            "Unknown %s value '%s'. Valid values: %s. Using %s.",
            LOG_LEVEL_ENV_VAR,
            env_value,
            ", ".join(_LOG_LEVELS),
            configured,
        )

    if configured in _LOG_LEVELS:
        return configured
    logger.warning("Unknown log_level '%s' in config. Using WARNING.", configured)
    return "WARNING"
