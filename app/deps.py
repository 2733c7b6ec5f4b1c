from fastapi import Request

from app.service.weather_service import WeatherClient


def get_weather_client(request: Request) -> WeatherClient:
    return request.app.state.weather_client
