"""
Central configuration for Walletfy.

Storage keys and field limits are fixed constants. Display preferences live
in config/settings.yml under the workspace root (see walletfy.workspace) and
are loaded into a Settings model.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

# Keys in the key-value medium
EVENTS_KEY = "events"
INITIAL_BALANCE_KEY = "initialBalance"

# Event field limits
NAME_MAX_LENGTH = 20
DESCRIPTION_MAX_LENGTH = 100

DEFAULT_INITIAL_BALANCE = 0.0


class Settings(BaseModel):
    """Display preferences for the CLI.

    None of these affect stored data or balance arithmetic.
    """

    currency_symbol: str = Field(default="$", description="Prefix for money amounts")
    date_format: str = Field(default="%d/%m/%Y", description="strftime format for event dates")
    expand_months: bool = Field(
        default=False, description="List each month's events in the report by default"
    )


def load_settings(path: Path) -> Settings:
    """Load settings from YAML (safe loader).

    A missing file yields default settings.

    Raises:
        ValueError: If the file exists but is not valid YAML or has bad values
    """
    if not path.exists():
        return Settings()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return Settings.model_validate(data)
    except (yaml.YAMLError, ValidationError) as e:
        raise ValueError(f"Invalid settings file {path}: {e}") from e


def save_settings(path: Path, settings: Settings) -> None:
    """Write settings to YAML, creating parent directories if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump(mode="json")
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(
            data,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


__all__ = [
    "EVENTS_KEY",
    "INITIAL_BALANCE_KEY",
    "NAME_MAX_LENGTH",
    "DESCRIPTION_MAX_LENGTH",
    "DEFAULT_INITIAL_BALANCE",
    "Settings",
    "load_settings",
    "save_settings",
]
