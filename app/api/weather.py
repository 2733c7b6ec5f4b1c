from fastapi import APIRouter, Depends

from app.deps import get_weather_client
from app.errors import ValidationError
from app.schema.weather import WeatherRecord
from app.service.weather_service import WeatherClient

router = APIRouter(prefix="/weather", tags=["Weather"])


# city 取 /weather/ 后面的全部内容，/weather/a/b 得到 "a/b"
@router.get("/{city:path}", response_model=WeatherRecord)
def weather(
        city: str,
        client: WeatherClient = Depends(get_weather_client)
):
    if not city:
        raise ValidationError("City not specified")

    return client.fetch(city)
