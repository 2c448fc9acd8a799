from datetime import timezone, tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from cadence.domain.constants import DEFAULT_DISPLAY_LIMIT

CONFIG_FILES = [
    Path.home() / ".config/cadence/config.toml",
    Path.home() / ".cadence.toml",
]

class AppConfig(BaseSettings):
    """
    Configuration model for cadence.
    Supports loading from:
    1. Config file (~/.config/cadence/config.toml or ~/.cadence.toml)
    2. Environment variables (CADENCE_*)
    3. Manual overrides (CLI / API)
    """

    model_config = SettingsConfigDict(
        env_prefix="CADENCE_",
        extra="ignore",
    )

    # Data
    data_file: Path | None = None

    # Scheduling
    timezone: str = "UTC"
    active_only: bool = True

    # Display
    display_limit: int = Field(default=DEFAULT_DISPLAY_LIMIT, ge=1)

    # API server
    host: str = "127.0.0.1"
    port: int = 8787

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        from pydantic_settings import TomlConfigSettingsSource

        # First existing config file wins; earlier sources take precedence.
        toml_file = next((f for f in CONFIG_FILES if f.exists()), None)

        if toml_file:
            return (
                init_settings,
                env_settings,
                TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
            )
        return (
            init_settings,
            env_settings,
        )

    @field_validator("data_file", mode="before")
    @classmethod
    def resolve_data_file(cls, v: Any) -> Path | None:
        if not v:
            return None
        return Path(v).expanduser().resolve()

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        load_timezone(v)
        return v

    @property
    def tzinfo(self) -> tzinfo:
        return load_timezone(self.timezone)

def load_timezone(name: str) -> tzinfo:
    """Resolve an IANA timezone name; 'UTC' needs no tz database."""
    if name.upper() in ("UTC", "Z"):
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {name!r}") from e

def resolve_config(cli_overrides: dict[str, Any] | None = None) -> AppConfig:
    """
    Multi-layered configuration resolution.
    1. Defaults in AppConfig
    2. ~/.config/cadence/config.toml (if exists)
    3. Environment variables (CADENCE_*)
    4. cli_overrides (passed from Typer or the API)
    """
    overrides = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    return AppConfig(**overrides)
