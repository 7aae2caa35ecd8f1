"""Application settings loaded from environment, YAML file or defaults."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .models.user import UserRole
from .services.auth import DEFAULT_LOGIN_DELAY

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_PATH = PROJECT_ROOT / "config" / "weddingbazaar.yaml"

ENV_PREFIX = "WEDDINGBAZAAR_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigError(ValueError):
    """Raised when a configuration value cannot be interpreted."""

    pass


@dataclass
class Settings:
    """Runtime settings."""

    login_delay: float = DEFAULT_LOGIN_DELAY
    demo_login_enabled: bool = True
    default_role: UserRole = UserRole.CUSTOMER  # Role assumed by routing when none is set
    log_level: str = "INFO"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "login_delay": self.login_delay,
            "demo_login_enabled": self.demo_login_enabled,
            "default_role": self.default_role.value,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Create from dictionary, validating each value."""
        defaults = cls()
        default_role = UserRole.parse(data.get("default_role", defaults.default_role))
        if default_role is None:
            raise ConfigError(f"Unknown default_role: {data.get('default_role')!r}")

        log_level = str(data.get("log_level", defaults.log_level)).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log_level: {log_level!r}")

        return cls(
            login_delay=_parse_delay(data.get("login_delay", defaults.login_delay)),
            demo_login_enabled=_parse_bool(
                data.get("demo_login_enabled", defaults.demo_login_enabled)
            ),
            default_role=default_role,
            log_level=log_level,
        )


def _parse_delay(value) -> float:
    try:
        delay = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"login_delay must be a number, got {value!r}")
    if delay < 0:
        raise ConfigError("login_delay must not be negative")
    return delay


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(f"Expected a boolean, got {value!r}")


def _load_file(config_path: Path) -> dict:
    """Load the weddingbazaar section of the YAML config file."""
    if not config_path.exists():
        return {}
    with open(config_path) as f:
        config = yaml.safe_load(f) or {}
    return config.get("weddingbazaar", {}) or {}


def _load_env(environ) -> dict:
    """Collect overrides from environment variables."""
    overrides = {}
    for key, env_name in (
        ("login_delay", "LOGIN_DELAY"),
        ("demo_login_enabled", "DEMO_LOGIN"),
        ("default_role", "DEFAULT_ROLE"),
        ("log_level", "LOG_LEVEL"),
    ):
        value = environ.get(ENV_PREFIX + env_name)
        if value is not None and value != "":
            overrides[key] = value
    return overrides


def load_settings(config_path: Optional[Path] = None, environ=None) -> Settings:
    """Load settings.

    Priority: environment variables > config file > defaults.
    """
    config_path = config_path or CONFIG_PATH
    environ = os.environ if environ is None else environ

    data = _load_file(config_path)
    data.update(_load_env(environ))
    settings = Settings.from_dict(data)
    logger.debug("Loaded settings: %s", settings.to_dict())
    return settings
