from fastapi import Depends

from app.core.config import Settings, settings
from app.data.cities import CITY_NAME_MAPPING
from app.clients.cwa import CwaClient
from app.services.weather_service import WeatherService


def get_settings() -> Settings:
    return settings

def get_cwa_client(cfg: Settings = Depends(get_settings)) -> CwaClient:
    return CwaClient(api_key=cfg.cwa_api_key, base_url=cfg.cwa_api_base_url)

def get_weather_service(
    cwa: CwaClient = Depends(get_cwa_client),
) -> WeatherService:
    return WeatherService(client=cwa, cities=CITY_NAME_MAPPING)
