"""Configuration management for Brainboard."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

BRAINBOARD_HOME = Path(os.environ.get("BRAINBOARD_HOME", Path.home() / "brainboard"))
CONFIG_FILE = BRAINBOARD_HOME / "config" / "brainboard.conf"

DEFAULT_BACKEND_URL = "http://localhost:8000"


@dataclass
class Config:
    """Brainboard configuration."""

    backend_url: str = DEFAULT_BACKEND_URL
    request_timeout: float = 10.0
    default_folder: str = "inbox"


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from brainboard.conf, then apply env overrides."""
    config = Config()
    path = path or CONFIG_FILE

    if path.exists():
        for line in path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "backend_url":
                    config.backend_url = value
                case "request_timeout":
                    try:
                        config.request_timeout = float(value)
                    except ValueError:
                        logger.warning(f"Ignoring invalid REQUEST_TIMEOUT: {value!r}")
                case "default_folder":
                    config.default_folder = value
                case _:
                    logger.debug(f"Unknown config key: {key}")

    env_url = os.environ.get("BRAINBOARD_BACKEND_URL")
    if env_url:
        config.backend_url = env_url

    config.backend_url = config.backend_url.rstrip("/")
    return config
