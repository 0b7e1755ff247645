from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from .errors import ConfigError

DEFAULT_CONFIG_FILE = "oneview_config.json"


class Settings(BaseSettings):
    # Appliance credentials
    username: str = Field(default="", alias="ONEVIEW_OV_USER")
    password: str = Field(default="", alias="ONEVIEW_OV_PASSWORD")
    domain: str = Field(default="LOCAL", alias="ONEVIEW_OV_DOMAIN")
    endpoint: str = Field(default="", alias="ONEVIEW_OV_ENDPOINT")

    # REST
    ssl_verify: bool = Field(default=False, alias="ONEVIEW_SSLVERIFY")
    api_version: int = Field(default=0, alias="ONEVIEW_APIVERSION")
    if_match: str = Field(default="*", alias="ONEVIEW_IF_MATCH")
    request_timeout: float = Field(default=60.0, alias="ONEVIEW_REQUEST_TIMEOUT")

    # Task polling
    task_poll_interval: float = Field(default=5.0, alias="ONEVIEW_TASK_POLL_INTERVAL")
    task_timeout: float = Field(default=1800.0, alias="ONEVIEW_TASK_TIMEOUT")
    task_max_poll_errors: int = Field(default=3, alias="ONEVIEW_TASK_MAX_POLL_ERRORS")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        populate_by_name = True

    @field_validator("api_version", mode="before")
    @classmethod
    def _lenient_api_version(cls, value: object) -> object:
        # unset or garbage means "ask the appliance"
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return 0
        return value


class ConfigFile(BaseModel):
    """Shape of ``oneview_config.json``."""

    UserName: str = ""
    Password: str = ""
    Domain: str = "LOCAL"
    Endpoint: str = ""
    SSlVerify: bool = False
    ApiVersion: int = 0
    IfMatch: str = "*"

    def to_settings(self) -> Settings:
        return Settings(
            username=self.UserName,
            password=self.Password,
            domain=self.Domain,
            endpoint=self.Endpoint,
            ssl_verify=self.SSlVerify,
            api_version=self.ApiVersion,
            if_match=self.IfMatch,
        )


def load_config_file(path: str | Path = DEFAULT_CONFIG_FILE) -> Settings:
    """Read a JSON config file into Settings.

    Polling and timeout knobs are not part of the file format, so they
    still come from the environment.
    """
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")
    try:
        data = json.loads(p.read_text())
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file {p} is not valid JSON: {exc}") from exc
    try:
        cfg = ConfigFile.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Config file {p} is invalid: {exc}") from exc
    return cfg.to_settings()


def load_settings(config_file: str | Path | None = None) -> Settings:
    """Settings from a config file when one is given, else the environment."""
    if config_file:
        return load_config_file(config_file)
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid ONEVIEW_* environment: {exc}") from exc
