# app/schema/weather.py
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictStr
from pydantic import ValidationError as PydanticValidationError

from app.errors import ParseError


class MainReading(BaseModel):
    model_config = ConfigDict(frozen=True)

    # 摄氏度（请求时 units=metric）
    temp: StrictFloat


class WeatherRecord(BaseModel):
    """返回给调用方的天气结构：{"name": "London", "main": {"temp": 12.3}}"""

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    main: MainReading

    @classmethod
    def from_payload(cls, data: Any) -> "WeatherRecord":
        if not isinstance(data, dict):
            raise ParseError("上游返回的数据不是 JSON 对象")
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise ParseError(f"上游返回的数据格式不正确: {e}") from e
