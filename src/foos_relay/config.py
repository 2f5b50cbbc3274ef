"""Environment configuration for the relay."""

from __future__ import annotations

import os
from typing import Mapping

from .models import RelaySettings, TeamMarkers

_REQUIRED_VARIABLES = (
    "DISCORD_TOKEN",
    "GIB_GUILD_ID",
    "GAME_DAY_CATEGORY_ID",
    "FOOS_WEBHOOK_URL",
)
DEFAULT_TEAM_ABBR = "LAF"
DEFAULT_TEAM_NAME_TEXT = "@Los Angeles Foos"


class ConfigError(RuntimeError):
    """Raised when required settings are missing."""


def load_settings(environ: Mapping[str, str] | None = None) -> RelaySettings:
    """Build settings from environment variables.

    Required: ``DISCORD_TOKEN``, ``GIB_GUILD_ID``, ``GAME_DAY_CATEGORY_ID`` and
    ``FOOS_WEBHOOK_URL``. Optional: ``TEAM_ABBR`` and ``TEAM_NAME_TEXT``.
    """

    env = os.environ if environ is None else environ
    values = {name: (env.get(name) or "").strip() for name in _REQUIRED_VARIABLES}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ConfigError("Missing env vars: " + ", ".join(missing))

    team = TeamMarkers(
        abbreviation=env.get("TEAM_ABBR") or DEFAULT_TEAM_ABBR,
        display_name=env.get("TEAM_NAME_TEXT") or DEFAULT_TEAM_NAME_TEXT,
    )
    return RelaySettings(
        discord_token=values["DISCORD_TOKEN"],
        guild_id=values["GIB_GUILD_ID"],
        game_day_category_id=values["GAME_DAY_CATEGORY_ID"],
        webhook_url=values["FOOS_WEBHOOK_URL"],
        team=team,
    )
