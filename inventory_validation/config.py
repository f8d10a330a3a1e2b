"""
Environment Configuration

Settings are read from the environment, after loading a local .env file
if one exists.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .engine.validator import DEFAULT_RULES_PATH

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    rules_path: str
    log_level: str = "INFO"
    json_logs: bool = True
    enable_metrics: bool = True


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load settings from the environment.

    Variables:
        INVENTORY_VALIDATION_RULES: Rules YAML path (default: packaged rules)
        INVENTORY_VALIDATION_LOG_LEVEL: Log level name (default: INFO)
        INVENTORY_VALIDATION_JSON_LOGS: Emit JSON log lines (default: true)
        INVENTORY_VALIDATION_METRICS: Collect metrics (default: true)
    """
    load_dotenv(env_file)

    return Settings(
        rules_path=os.getenv("INVENTORY_VALIDATION_RULES") or str(DEFAULT_RULES_PATH),
        log_level=os.getenv("INVENTORY_VALIDATION_LOG_LEVEL", "INFO").upper(),
        json_logs=_get_bool("INVENTORY_VALIDATION_JSON_LOGS", True),
        enable_metrics=_get_bool("INVENTORY_VALIDATION_METRICS", True),
    )
