from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Tuple

from app.clients.cwa import CwaClient
from app.core.errors import (
    ForecastError,
    InvalidCity,
    MalformedUpstreamData,
    NetworkError,
    NoData,
    ServerMisconfigured,
)
from app.models.weather import ForecastResult, ForecastSlot

logger = logging.getLogger(__name__)


def _percent(v: str) -> str:
    return f"{v}%"


def _as_is(v: str) -> str:
    return v


# elementName -> (ForecastSlot field, value formatter)
ELEMENT_FIELDS: Mapping[str, Tuple[str, Callable[[str], str]]] = MappingProxyType({
    "Wx": ("weather", _as_is),
    "PoP": ("rain", _percent),
    "MinT": ("min_temp", _as_is),
    "MaxT": ("max_temp", _as_is),
    "CI": ("comfort", _as_is),
    "WS": ("wind_speed", _as_is),
})


def _time_entries(element: dict) -> List[dict]:
    return element.get("time") or []


def _parameter_name(entry: dict) -> str | None:
    param = entry.get("parameter") or {}
    value = param.get("parameterName")
    return None if value is None else str(value)


def _check_alignment(elements: List[dict], expected: int) -> None:
    for element in elements:
        if element.get("elementName") not in ELEMENT_FIELDS:
            continue
        n = len(_time_entries(element))
        if n != expected:
            raise MalformedUpstreamData(
                f"天氣因子 {element.get('elementName')} 的時段數 ({n}) 與預期 ({expected}) 不符"
            )


def build_forecasts(elements: List[dict]) -> List[ForecastSlot]:
    """
    Flatten CWA weatherElement[] into one slot per time index.
    The first element's time[] drives the slot count and start/end times;
    every other element must line up index-for-index.
    """
    if not elements:
        return []

    base_times = _time_entries(elements[0])
    _check_alignment(elements, len(base_times))

    out: List[ForecastSlot] = []
    for i, base in enumerate(base_times):
        fields: Dict[str, Any] = {
            "start_time": base.get("startTime", ""),
            "end_time": base.get("endTime", ""),
        }
        for element in elements:
            target = ELEMENT_FIELDS.get(element.get("elementName"))
            if target is None:
                continue
            value = _parameter_name(element["time"][i])
            if value is None:
                continue
            field, fmt = target
            fields[field] = fmt(value)
        out.append(ForecastSlot(**fields))
    return out


def reshape(payload: Dict[str, Any], location_name: str) -> ForecastResult:
    records = payload.get("records") or {}
    locations = records.get("location") or []
    if not locations:
        raise NoData(location_name)

    # one locationName in, exactly one location out
    loc = locations[0]
    return ForecastResult(
        city=loc.get("locationName", ""),
        update_time=records.get("datasetDescription") or "",
        forecasts=build_forecasts(loc.get("weatherElement") or []),
    )


class WeatherService:
    def __init__(self, client: CwaClient, cities: Mapping[str, str]):
        self.client = client
        self.cities = cities

    def location_for(self, city_id: str) -> str:
        location_name = self.cities.get(city_id.lower())
        if not location_name:
            raise InvalidCity(city_id, self.cities.keys())
        return location_name

    async def resolve(self, city_id: str) -> ForecastResult:
        location_name = self.location_for(city_id)

        if not self.client.configured:
            raise ServerMisconfigured()

        try:
            payload = await self.client.fetch_forecast(location_name)
        except NetworkError as e:
            logger.error("Failed to fetch forecast for %s: %s", location_name, e.reason)
            raise
        except MalformedUpstreamData as e:
            logger.error("Unreadable CWA response for %s: %s", location_name, e.message)
            raise
        except ForecastError as e:
            logger.error("Failed to fetch forecast for %s: HTTP %s %s", location_name, e.status_code, e.message)
            raise

        return reshape(payload, location_name)
