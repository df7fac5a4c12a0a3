"""
Configuration validation utilities.

Read environment variables with type checks and actionable error messages.
"""
import os
import warnings
from typing import Optional

from .exceptions import ConfigurationError

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)

    if value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default

    return value


def get_bool_env(key: str, default: bool) -> bool:
    """
    Get boolean environment variable.

    :raises: ConfigurationError if the value is not a recognised boolean
    """
    value = get_optional_env(key)
    if value is None or value.strip() == "":
        return default

    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False

    raise ConfigurationError(
        f"{key} must be a boolean (true/false), got: {value!r}"
    )


def get_int_env(key: str, default: int, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    """
    Get integer environment variable within optional bounds.

    :raises: ConfigurationError if not an integer or out of range
    """
    value = get_optional_env(key)
    if value is None or value.strip() == "":
        return default

    try:
        number = int(value.strip())
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got: {value!r}") from None

    if minimum is not None and number < minimum:
        raise ConfigurationError(f"{key} must be >= {minimum}, got {number}")
    if maximum is not None and number > maximum:
        raise ConfigurationError(f"{key} must be <= {maximum}, got {number}")

    return number


def get_float_env(key: str, default: float, minimum: Optional[float] = None, maximum: Optional[float] = None) -> float:
    """
    Get float environment variable within optional bounds.

    :raises: ConfigurationError if not a number or out of range
    """
    value = get_optional_env(key)
    if value is None or value.strip() == "":
        return default

    try:
        number = float(value.strip())
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got: {value!r}") from None

    if minimum is not None and number < minimum:
        raise ConfigurationError(f"{key} must be >= {minimum}, got {number}")
    if maximum is not None and number > maximum:
        raise ConfigurationError(f"{key} must be <= {maximum}, got {number}")

    return number


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False

    placeholder_patterns = [
        "your_",
        "placeholder",
        "xxx",
        "replace",
        "changeme",
    ]

    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)


def validate_path(path: str, path_name: str, must_exist: bool = False) -> str:
    """
    Validate file/directory path.

    :param path: Path to validate
    :param path_name: Name of the path (for error messages)
    :param must_exist: Whether path must exist
    :return: Validated path
    :raises: ConfigurationError if invalid
    """
    if not path:
        raise ConfigurationError(f"{path_name} is required.")

    if must_exist and not os.path.exists(path):
        raise ConfigurationError(
            f"{path_name} does not exist: {path}\n"
            f"Please check the path and ensure the file exists."
        )

    return path
