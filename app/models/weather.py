from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ForecastSlot(_CamelModel):
    start_time: str
    end_time: str
    weather: str = ""
    rain: str = Field(default="", description="Probability of precipitation, e.g. '20%'")
    min_temp: str = ""
    max_temp: str = ""
    comfort: str = ""
    wind_speed: str = ""


class ForecastResult(_CamelModel):
    city: str
    update_time: str = ""
    forecasts: List[ForecastSlot] = Field(default_factory=list)


class WeatherResponse(BaseModel):
    success: bool = True
    data: ForecastResult


class ErrorResponse(BaseModel):
    error: str
    message: str
    details: Optional[Any] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class ServiceInfo(BaseModel):
    message: str
    endpoints: Dict[str, str]
