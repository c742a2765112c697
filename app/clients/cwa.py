from __future__ import annotations

from typing import Any, Dict
import httpx

from app.core.errors import MalformedUpstreamData, NetworkError, UpstreamError

CWA_API_BASE_URL = "https://opendata.cwa.gov.tw/api"
# 36-hour general forecast, one location per county/city
FORECAST_DATASET = "F-C0032-001"


class CwaClient:
    def __init__(self, api_key: str | None, base_url: str = CWA_API_BASE_URL):
        self.api_key = api_key or ""
        self.base_url = base_url.rstrip("/")

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @property
    def forecast_url(self) -> str:
        return f"{self.base_url}/v1/rest/datastore/{FORECAST_DATASET}"

    async def fetch_forecast(self, location_name: str) -> Dict[str, Any]:
        """
        Raw F-C0032-001 payload for a single location.
        Raises UpstreamError on a non-2xx answer, NetworkError when no answer arrives.
        """
        params = {"Authorization": self.api_key, "locationName": location_name}

        try:
            async with httpx.AsyncClient() as client:
                r = await client.get(self.forecast_url, params=params)
                r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamError.from_response(e.response) from e
        except httpx.RequestError as e:
            # str(e) never includes the request URL, so the key stays out of it
            raise NetworkError(str(e) or type(e).__name__) from e

        try:
            data = r.json()
        except ValueError as e:
            raise MalformedUpstreamData("CWA 回傳的資料不是有效的 JSON") from e

        if not isinstance(data, dict):
            raise MalformedUpstreamData("CWA 回傳的資料格式不符")
        return data
