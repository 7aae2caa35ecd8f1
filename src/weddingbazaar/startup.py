"""Application startup: configuration and service factories."""

import logging
import os
import secrets
from pathlib import Path

from .config import PROJECT_ROOT, Settings, load_settings
from .context import AppContext

SESSKEY_PATH = PROJECT_ROOT / ".sesskey"

# Module-level state
_settings = None


def resolve_session_secret(sesskey_path: Path = SESSKEY_PATH) -> str:
    """Resolve session secret from environment or file.

    Priority: WEDDINGBAZAAR_SESSION_SECRET env var > .sesskey file > auto-generate.
    """
    secret = os.environ.get("WEDDINGBAZAAR_SESSION_SECRET")
    if secret:
        return secret
    if sesskey_path.exists():
        return sesskey_path.read_text().strip()
    secret = secrets.token_hex(32)
    sesskey_path.write_text(secret)
    return secret


def init_settings() -> Settings:
    """Load settings and configure logging."""
    global _settings
    _settings = load_settings()
    logging.basicConfig(
        level=_settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return _settings


def get_settings() -> Settings:
    """Get the loaded settings, loading them on first use."""
    if _settings is None:
        return init_settings()
    return _settings


def get_app_context() -> AppContext:
    """Create an AppContext with the current settings."""
    return AppContext(settings=get_settings())
