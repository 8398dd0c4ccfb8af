import json
import logging
import os

from dataclasses import dataclass

from .errors import ConfigError

log = logging.getLogger(__name__)

DEFAULT_OUTPUT = "public"
DEFAULT_URLDIR = "urls"


@dataclass
class Config:
    output: str = ""
    urldir: str = ""

    @classmethod
    def default(cls) -> "Config":
        return cls(output=DEFAULT_OUTPUT, urldir=DEFAULT_URLDIR)

    @classmethod
    def from_json(cls, data: str) -> "Config":
        """ Parse a config document, unknown keys are ignored and missing ones stay empty """
        try:
            parsed = json.loads(data)
        except ValueError as e:
            raise ConfigError(f"Invalid JSON: {e}")

        if not isinstance(parsed, dict):
            raise ConfigError("Config must be a JSON object")

        fields = {}
        for key in ("output", "urldir"):
            # null reads as an unset field
            value = parsed.get(key)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ConfigError(f"'{key}' must be a string, got {type(value).__name__}")
            fields[key] = value

        return cls(**fields)


def load_config(path: str = None) -> tuple[Config, bool]:
    """
    Read config.json from the current directory.

    Returns the config and whether loading worked. On failure the config is
    empty and the caller is expected to use Config.default() instead.
    """
    path = path or os.path.join(".", "config.json")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
    except (OSError, UnicodeDecodeError):
        log.warning(f"config file cannot be read at -> {path}")
        return Config(), False

    try:
        return Config.from_json(data), True
    except ConfigError as e:
        log.warning(f"Failed to parse config at -> {path} ({e})")
        return Config(), False
