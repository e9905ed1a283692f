"""Settings for :mod:`timelane_core`.

Settings are defined in one place (this file) and loaded using `pydantic-settings`.

Supported sources (lowest → highest precedence):
1) `timelane.toml` (current working directory)
2) `.env` (current working directory)
3) environment variables (prefix: `TIMELANE_`)
4) explicit overrides (`Settings(...)` / `Settings.load(...)`)

`timelane.toml` is intentionally flat: keys map 1:1 to `Settings` fields.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import PydanticBaseSettingsSource, TomlConfigSettingsSource

from timelane_core.exceptions import ConfigError
from timelane_core.loggers import Logger, Loggers, load_logger
from timelane_core.models import DEFAULT_CATEGORY, DEFAULT_SUBSYSTEM, LaneTypeOptions, SignpostChannel

ENV_PREFIX = "TIMELANE_"
TOML_FILENAME = "timelane.toml"


def _coerce_log_level(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("log_level must be an int or a log level name")

    if isinstance(value, int):
        return value

    text = str(value).strip()
    if not text:
        return logging.INFO

    if text.isdigit():
        return int(text)

    mapped = logging.getLevelNamesMapping().get(text.upper())
    if isinstance(mapped, int):
        return mapped

    raise ValueError(f"Invalid log_level: {value!r}")


class Settings(BaseSettings):
    """Process-wide instrumentation settings."""

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix=ENV_PREFIX,
        env_file=".env",
    )

    # When false, subscriptions default to the disabled logger.
    enabled: bool = Field(default=True)

    # Channel
    subsystem: str = Field(default=DEFAULT_SUBSYSTEM)
    category: str = Field(default=DEFAULT_CATEGORY)

    # Optional `module:attr` reference to a custom default logger.
    logger: str | None = Field(default=None)

    # Advisory lane selection for operator wrappers.
    lanes: LaneTypeOptions = Field(default=LaneTypeOptions.ALL)

    # Stdlib logging output for the signpost channel
    log_format: Literal["text", "ndjson"] = Field(default="text")
    log_level: int = Field(default=logging.INFO)

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, value: Any) -> int:
        return _coerce_log_level(value)

    @field_validator("lanes", mode="before")
    @classmethod
    def _validate_lanes(cls, value: Any) -> LaneTypeOptions:
        if isinstance(value, int) and not isinstance(value, bool):
            return LaneTypeOptions(value)
        return LaneTypeOptions.parse(value)

    @field_validator("log_format", mode="before")
    @classmethod
    def _validate_log_format(cls, value: Any) -> str:
        text = str(value or "text").strip().lower()
        return "ndjson" if text == "json" else text

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_files = None
        if hasattr(init_settings, "init_kwargs"):
            toml_files = init_settings.init_kwargs.get("_timelane_toml_files")  # type: ignore[attr-defined]

        if toml_files is None:
            toml_files = [Path.cwd() / TOML_FILENAME]

        toml_settings = TomlConfigSettingsSource(settings_cls, toml_file=toml_files)

        return (
            init_settings,
            env_settings,
            dotenv_settings,
            toml_settings,
            file_secret_settings,
        )

    @classmethod
    def load(cls, *, cwd: Path | None = None, **overrides: Any) -> "Settings":
        """Load settings rooted at ``cwd``, raising :class:`ConfigError` when invalid."""

        cwd_path = (cwd or Path.cwd()).expanduser().resolve()
        try:
            return cls(
                _timelane_toml_files=[cwd_path / TOML_FILENAME],
                _env_file=cwd_path / ".env",
                **overrides,
            )
        except ValidationError as exc:
            raise ConfigError(f"Invalid timelane settings: {exc}") from exc

    @property
    def channel(self) -> SignpostChannel:
        return SignpostChannel(subsystem=self.subsystem, category=self.category)

    def build_logger(self) -> Logger:
        """Return the default logger these settings describe."""

        if not self.enabled:
            return Loggers.disabled
        if self.logger:
            return load_logger(self.logger)
        return Loggers.signpost()


__all__ = ["ENV_PREFIX", "Settings", "TOML_FILENAME"]
