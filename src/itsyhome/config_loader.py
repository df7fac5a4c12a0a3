"""
Configuration loader with validation.
"""
import logging

from dotenv import load_dotenv

from .config import ItsyhomeConfig
from .config_validator import (
    get_bool_env,
    get_float_env,
    get_int_env,
    get_optional_env,
    validate_path,
)
from .exceptions import ConfigurationError

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def load_config_from_env(load_env_file: bool = True) -> ItsyhomeConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        app = create_app(engine, config)

    :param load_env_file: Load a .env file first (local development)
    :return: Validated ItsyhomeConfig instance
    :raises: ConfigurationError if a value is invalid
    """
    if load_env_file:
        load_dotenv()

    log_level = (get_optional_env("ITSYHOME_LOG_LEVEL", "INFO") or "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ConfigurationError(
            f"ITSYHOME_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got: {log_level!r}"
        )

    config = ItsyhomeConfig(
        snapshot_path=get_optional_env("ITSYHOME_SNAPSHOT_PATH"),
        webhook_enabled=get_bool_env("ITSYHOME_WEBHOOK_ENABLED", False),
        webhook_host=get_optional_env("ITSYHOME_WEBHOOK_HOST", "0.0.0.0"),
        webhook_port=get_int_env("ITSYHOME_WEBHOOK_PORT", 8423, minimum=1, maximum=65535),
        pro_enabled=get_bool_env("ITSYHOME_PRO", False),
        enable_suggestions=get_bool_env("ITSYHOME_ENABLE_SUGGESTIONS", True),
        suggestion_threshold=get_float_env(
            "ITSYHOME_SUGGESTION_THRESHOLD", 0.6, minimum=0.0, maximum=1.0
        ),
        suggestion_limit=get_int_env("ITSYHOME_SUGGESTION_LIMIT", 3, minimum=0),
        log_level=log_level,
    )

    # Validate paths if they're set
    if config.snapshot_path:
        validate_path(config.snapshot_path, "ITSYHOME_SNAPSHOT_PATH", must_exist=True)

    return config


def configure_logging(config: ItsyhomeConfig) -> None:
    """Configure root logging for entry points (app, CLI)."""
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()],
    )
