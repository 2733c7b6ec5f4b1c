import json
import logging

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from app.errors import ConfigError

logger = logging.getLogger(__name__)


class ApiConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    api_key: str = Field(alias="OpenWeatherMapApiKey")


def load_api_config(path: str) -> ApiConfig:
    """
    读取凭证文件，例如：
    {
        "OpenWeatherMapApiKey": "xxxx"
    }
    每次调用都重新读文件，不做缓存
    """
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise ConfigError(f"无法读取配置文件 {path}: {e}") from e

    try:
        data = json.loads(raw)
    except ValueError as e:
        # 包括编码错误（UnicodeDecodeError）
        raise ConfigError(f"配置文件 {path} 不是合法的 JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"配置文件 {path} 必须是 JSON 对象")

    try:
        config = ApiConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError(f"配置文件 {path} 缺少 OpenWeatherMapApiKey: {e}") from e

    logger.debug(f"已加载配置文件: {path}")
    return config
