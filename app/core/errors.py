from __future__ import annotations

from typing import Any, Iterable

import httpx

DEFAULT_FETCH_MESSAGE = "無法取得天氣資料"
RETRY_LATER_MESSAGE = "無法取得天氣資料，請稍後再試"


class ForecastError(Exception):
    """Base for every failure the forecast pipeline reports to clients.

    Each subclass fixes the HTTP status and the short `error` label; the
    instance carries the human message and optional `details` payload.
    """

    status_code: int = 500
    error: str = "伺服器錯誤"

    def __init__(self, message: str, details: Any = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code

    def to_payload(self) -> dict:
        payload: dict[str, Any] = {"error": self.error, "message": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class InvalidCity(ForecastError):
    status_code = 400
    error = "無效的城市 ID"

    def __init__(self, city_id: str, valid_ids: Iterable[str]):
        self.city_id = city_id
        self.valid_ids = list(valid_ids)
        super().__init__(f"不支援查詢此城市: {city_id}，請使用 {', '.join(self.valid_ids)}")


class ServerMisconfigured(ForecastError):
    status_code = 500
    error = "伺服器設定錯誤"

    def __init__(self, message: str = "請在 .env 檔案中設定 CWA_API_KEY"):
        super().__init__(message)


class NoData(ForecastError):
    status_code = 404
    error = "查無資料"

    def __init__(self, location_name: str):
        self.location_name = location_name
        super().__init__(f"無法取得 {location_name} 天氣資料")


class MalformedUpstreamData(ForecastError):
    status_code = 502
    error = "CWA 資料格式錯誤"


class UpstreamError(ForecastError):
    """CWA answered, but with a non-success status."""

    error = "CWA API 錯誤"

    @classmethod
    def from_response(cls, response: httpx.Response) -> "UpstreamError":
        try:
            body: Any = response.json()
        except ValueError:
            body = response.text or None

        message = None
        if isinstance(body, dict):
            message = body.get("message")
        return cls(message or DEFAULT_FETCH_MESSAGE, details=body, status_code=response.status_code)


class NetworkError(ForecastError):
    """The request never produced a response (DNS, connect, timeout, transport)."""

    status_code = 500
    error = "伺服器錯誤"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(RETRY_LATER_MESSAGE)
