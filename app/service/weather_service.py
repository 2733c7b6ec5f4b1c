# app/service/weather_service.py
import logging
from typing import Optional

import requests

from app.config import load_api_config
from app.errors import ParseError, TransportError
from app.schema.weather import WeatherRecord
from app.settings import GatewaySettings

logger = logging.getLogger(__name__)


def _mask(key: str) -> str:
    if len(key) <= 8:
        return "****"
    return key[:4] + "****" + key[-4:]


class WeatherClient:
    """调用 OpenWeatherMap 查询当前天气"""

    def __init__(
            self,
            settings: GatewaySettings,
            session: Optional[requests.Session] = None
    ):
        self.settings = settings
        # 不传 session 时每次请求直接用 requests.get，不在线程间共享连接
        self.session = session

    def build_params(self, city: str, api_key: str) -> dict:
        # city 原样传入，编码交给 requests
        return {
            "q": city,
            "appid": api_key,
            "units": self.settings.units,
        }

    def fetch(self, city: str) -> WeatherRecord:
        # 每次请求都重新读取凭证
        config = load_api_config(self.settings.config_path)
        params = self.build_params(city, config.api_key)

        logger.info(
            f"请求上游: {self.settings.upstream_url} "
            f"q={city} appid={_mask(config.api_key)} units={self.settings.units}"
        )

        try:
            http = self.session or requests
            res = http.get(
                self.settings.upstream_url,
                params=params,
                timeout=self.settings.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"Weather API error: {e}") from e

        # 原始响应，方便排查
        logger.debug(f"上游响应 {res.status_code}: {res.text}")

        # 不检查状态码，错误响应里没有 name/main.temp，会在解析时失败
        try:
            data = res.json()
        except ValueError as e:
            raise ParseError(
                f"上游返回的不是 JSON (status {res.status_code}): {e}"
            ) from e

        try:
            return WeatherRecord.from_payload(data)
        except ParseError as e:
            raise ParseError(f"{e.message} (status {res.status_code})") from e
