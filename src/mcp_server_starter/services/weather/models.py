"""Argument models for the weather tools and the NWS response shapes they consume."""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ForecastArgs(BaseModel):
    """Input of the forecast tool. Range checks happen in the handler."""

    model_config = ConfigDict(extra="forbid")

    latitude: float = Field(
        strict=True,
        description="Latitude of the location (-90 to 90)",
        json_schema_extra={"minimum": -90, "maximum": 90},
    )
    longitude: float = Field(
        strict=True,
        description="Longitude of the location (-180 to 180)",
        json_schema_extra={"minimum": -180, "maximum": 180},
    )


class AlertsArgs(BaseModel):
    """Input of the alerts tool. The state code is normalized in the handler."""

    model_config = ConfigDict(extra="forbid")

    state: str = Field(
        description="Two-letter US state code (e.g., 'CA', 'NY', 'TX')",
        json_schema_extra={"pattern": "^[A-Z]{2}$"},
    )


class _NWSModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class RelativeLocationProperties(_NWSModel):
    city: str
    state: str


class RelativeLocation(_NWSModel):
    properties: RelativeLocationProperties


class PointsProperties(_NWSModel):
    forecast: str
    relative_location: RelativeLocation = Field(alias="relativeLocation")


class NWSPointsResponse(_NWSModel):
    """``GET /points/{lat},{lon}``."""

    properties: PointsProperties


class ForecastPeriod(_NWSModel):
    name: str
    temperature: Optional[Union[int, float]] = None
    temperature_unit: str = Field(default="", alias="temperatureUnit")
    wind_speed: str = Field(default="", alias="windSpeed")
    wind_direction: str = Field(default="", alias="windDirection")
    short_forecast: str = Field(default="", alias="shortForecast")
    detailed_forecast: str = Field(default="", alias="detailedForecast")


class ForecastProperties(_NWSModel):
    periods: List[ForecastPeriod] = []


class NWSForecastResponse(_NWSModel):
    """``GET {forecastUrl}``."""

    properties: ForecastProperties


class AlertProperties(_NWSModel):
    event: Optional[str] = None
    severity: Optional[str] = None
    urgency: Optional[str] = None
    area_desc: Optional[str] = Field(default=None, alias="areaDesc")
    headline: Optional[str] = None
    description: Optional[str] = None
    instruction: Optional[str] = None
    effective: Optional[str] = None
    expires: Optional[str] = None


class AlertFeature(_NWSModel):
    properties: AlertProperties


class NWSAlertsResponse(_NWSModel):
    """``GET /alerts?area={STATE}``."""

    features: List[AlertFeature] = []
