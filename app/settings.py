import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


class GatewaySettings(BaseModel):
    config_path: str = ".apiConfig"
    upstream_url: str = OPENWEATHER_URL
    units: str = "metric"
    # 秒；None 表示不设超时
    timeout: Optional[float] = 10.0
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "GatewaySettings":
        """从环境变量（以及 .env 文件）读取配置，未设置的字段用默认值"""
        load_dotenv()

        values = {}
        env_map = {
            "config_path": "WEATHER_API_CONFIG",
            "upstream_url": "WEATHER_UPSTREAM_URL",
            "units": "WEATHER_UNITS",
            "timeout": "WEATHER_TIMEOUT",
            "host": "HOST",
            "port": "PORT",
            "log_level": "LOG_LEVEL",
        }
        for field, env_name in env_map.items():
            value = os.getenv(env_name)
            if value:
                values[field] = value

        return cls(**values)

    @field_validator("timeout")
    @classmethod
    def zero_timeout_means_none(cls, v):
        if v is not None and v <= 0:
            return None
        return v
