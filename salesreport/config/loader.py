import copy
import logging
from pathlib import Path

import yaml

from .defaults import DEFAULT_CONFIG


def load_config(path: str | None) -> dict:
    """
    Load and merge user settings with framework defaults.

    Rules:
    - Defaults ALWAYS win if user omits fields
    - logging.level must name a standard logging level (ValueError)
    - Sections are merged key by key, and mappings nested inside a
      section (summary.labels) are merged key by key as well
    """

    # -------------------------------------------------
    # 1. Load user config (if provided)
    # -------------------------------------------------
    user_config = {}

    if path:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}

        if not isinstance(user_config, dict):
            raise ValueError("Config file must contain a YAML dictionary")

    # -------------------------------------------------
    # 2. Merge with defaults
    # -------------------------------------------------
    config = copy.deepcopy(DEFAULT_CONFIG)

    for key, value in user_config.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            for sub_key, sub_value in value.items():
                current = config[key].get(sub_key)
                if isinstance(sub_value, dict) and isinstance(current, dict):
                    current.update(sub_value)
                else:
                    config[key][sub_key] = sub_value
        else:
            config[key] = value

    # -------------------------------------------------
    # 3. Enforce a usable logging level
    # -------------------------------------------------
    if not isinstance(config["logging"], dict):
        raise ValueError("Config section 'logging' must be a YAML dictionary")

    level = str(config["logging"].get("level", "INFO")).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown logging level: {level}")

    config["logging"]["level"] = level

    return config
