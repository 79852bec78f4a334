"""
Credential loading.

The API key comes from the ``SORARE_API_KEY`` environment variable when it
is set, otherwise from a small JSON file shaped ``{"api_key": "<string>"}``.
The key itself is never validated; a bad key only shows up as failed
requests.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from sorare_cards.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.json")
API_KEY_ENV_VAR = "SORARE_API_KEY"


@dataclass(frozen=True)
class Config:
    api_key: str

    def __repr__(self) -> str:
        return "Config(api_key='***')"


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Config:
    """Read the credential from a JSON config file. Raises ConfigError."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except ValueError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    api_key = raw.get("api_key")
    if not isinstance(api_key, str):
        raise ConfigError(f"Config file {path} has no string 'api_key'")

    return Config(api_key=api_key)


def resolve_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Config:
    """Prefer the environment variable; fall back to the config file."""
    api_key = os.environ.get(API_KEY_ENV_VAR)
    if api_key:
        logger.debug(f"Using API key from ${API_KEY_ENV_VAR}")
        return Config(api_key=api_key)

    logger.debug(f"Loading API key from {path}")
    return load_config(path)
