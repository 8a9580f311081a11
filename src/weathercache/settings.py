from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_HOST = "history.openweathermap.org"
DEFAULT_CACHE_SIZE = 5100
DEFAULT_GEO_PRECISION = 1


class ClientSettings(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    api_host: str = DEFAULT_API_HOST
    api_key: str = ""
    timeout_seconds: float = Field(default=5.0, gt=0)
    # cache_size and geo_precision are checked by the client factory.
    cache_size: int = DEFAULT_CACHE_SIZE
    geo_precision: int = DEFAULT_GEO_PRECISION
    use_ssl: bool = True

    @field_validator("api_host")
    @classmethod
    def validate_api_host(cls, value: str) -> str:
        text = value.strip().strip("/")
        if not text:
            raise ValueError("owm.api_host must not be empty")
        if "://" in text:
            raise ValueError("owm.api_host must be a bare host name, use owm.use_ssl to pick the scheme")
        return text

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, value: str) -> str:
        return value.strip()


class WeatherCacheYamlSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    owm: ClientSettings = Field(default_factory=ClientSettings)


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    weathercache_config_path: Path = Path("config/weathercache.yaml")
    weathercache_api_key: str | None = None


def _load_yaml_settings(path: Path) -> WeatherCacheYamlSettings:
    if not path.exists():
        raise FileNotFoundError(f"Weathercache config file not found: {path}")

    raw_config = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ValueError("Weathercache config must be a YAML mapping/object at the top level")

    owm_section = raw_config.get("owm")
    if owm_section is not None and not isinstance(owm_section, dict):
        raise ValueError("Weathercache config key 'owm' must be a mapping")
    return WeatherCacheYamlSettings.model_validate(raw_config)


def load_settings(path: Path | None = None) -> ClientSettings:
    """Read client settings from YAML, falling back to the environment for the API key."""
    env = EnvSettings()
    config_path = Path(path) if path is not None else env.weathercache_config_path
    settings = _load_yaml_settings(config_path).owm
    if not settings.api_key and env.weathercache_api_key:
        settings = settings.model_copy(update={"api_key": env.weathercache_api_key.strip()})
    return settings
