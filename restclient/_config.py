from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Defaults applied to every new ``Connection`` and to ``init()``.

    Read from ``RESTCLIENT_*`` environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="RESTCLIENT_",
        extra="ignore",
        case_sensitive=False,
    )

    timeout_seconds: float = Field(
        default=0.0,
        ge=0,
        description="Per-request timeout in seconds; 0 disables it.",
    )
    user_agent: str = Field(
        default="",
        description="Prefix prepended to the restclient User-Agent.",
    )
    ca_bundle: Path | None = Field(
        default=None,
        description="CA bundle loaded by init() instead of certifi's.",
    )


def get_settings() -> ClientSettings:
    return ClientSettings()
