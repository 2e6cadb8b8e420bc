# -*- coding: utf-8 -*-

"""
Optional project settings read from a YAML file.

Example ``.cvr-i18n.yml``:

    directory: src/i18n/locales
    base: zh-Hans.json
    export: build/missing
"""

import os
from typing import Dict, Optional

import yaml

from .locales import LocaleError

DEFAULT_CONFIG_FILE = ".cvr-i18n.yml"
KNOWN_KEYS = ("directory", "base", "export")
# Values that name directories are taken relative to the config file
PATH_KEYS = ("directory", "export")


class ConfigError(LocaleError):
    """Raised when the configuration file cannot be used."""


def load_config(path: Optional[str] = None) -> Dict[str, str]:
    """Read settings from ``path``, or from ``.cvr-i18n.yml`` if present.

    Args:
        path: Explicit configuration file, which must exist

    Returns:
        A dict holding any of ``directory``, ``base`` and ``export``
    """
    if path is None:
        if not os.path.isfile(DEFAULT_CONFIG_FILE):
            return {}
        path = DEFAULT_CONFIG_FILE

    try:
        with open(path, "r", encoding="utf-8") as f:
            # Use safe_load to prevent arbitrary code execution
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Config {path}: YAML parsing failed - {e}") from e

    # Handle empty files
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path}: root must be a mapping")

    unknown = sorted(str(key) for key in data if key not in KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Config {path}: unknown keys {', '.join(unknown)}")

    config_dir = os.path.dirname(path)
    settings = {}
    for key, value in data.items():
        if not isinstance(value, str):
            raise ConfigError(f"Config {path}: {key} must be a string")
        if key in PATH_KEYS and not os.path.isabs(value):
            value = os.path.join(config_dir, value)
        settings[key] = value
    return settings
