from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

Timestamp = Union[int, datetime]


def to_unix_seconds(value: Timestamp) -> int:
    """Normalize a window bound to integer Unix seconds; naive datetimes are read as UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    return int(value)


@dataclass(frozen=True, slots=True)
class Position:
    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class BucketedPosition:
    """Coordinate snapped to the ``1/geo_precision`` degree grid."""

    latitude: float
    longitude: float


class MainInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    temp: float
    pressure: float | None = None
    humidity: float | None = None
    temp_min: float | None = None
    temp_max: float | None = None


class WindInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    speed: float
    deg: float | None = None
    gust: float | None = None


class CloudsInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    all: int


class PrecipitationInfo(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    one_hour: float | None = Field(default=None, alias="1h")
    three_hours: float | None = Field(default=None, alias="3h")


class WeatherCondition(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    main: str
    description: str
    icon: str


class HistoryItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    dt: int
    main: MainInfo
    wind: WindInfo | None = None
    clouds: CloudsInfo | None = None
    weather: list[WeatherCondition] = Field(default_factory=list)
    rain: PrecipitationInfo | None = None
    snow: PrecipitationInfo | None = None

    @property
    def observed_at(self) -> datetime:
        return datetime.fromtimestamp(self.dt, tz=timezone.utc)


class HistoryResponse(BaseModel):
    """Hourly history payload returned by the OpenWeatherMap history endpoint."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    cod: str | int = "200"
    city_id: int | None = None
    calctime: float | None = None
    cnt: int = 0
    items: list[HistoryItem] = Field(default_factory=list, alias="list")
