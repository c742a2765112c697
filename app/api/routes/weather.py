from fastapi import APIRouter, Depends

from app.api.deps import get_weather_service
from app.models.weather import ErrorResponse, WeatherResponse
from app.services.weather_service import WeatherService

router = APIRouter()

@router.get(
    "/weather/{city_id}",
    response_model=WeatherResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_weather(city_id: str, svc: WeatherService = Depends(get_weather_service)):
    data = await svc.resolve(city_id)
    return WeatherResponse(success=True, data=data)
