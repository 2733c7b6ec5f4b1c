import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """网关内部错误的基类，kind 用来区分来源"""

    kind = "internal"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigError(GatewayError):
    kind = "config"


class TransportError(GatewayError):
    kind = "transport"


class ParseError(GatewayError):
    kind = "parse"


class ValidationError(GatewayError):
    kind = "validation"
    status_code = 400


async def gateway_error_handler(request: Request, exc: GatewayError):
    if exc.status_code < 500:
        logger.warning(f"请求无效 [{exc.kind}] {request.url.path}: {exc.message}")
    else:
        logger.error(f"请求失败 [{exc.kind}] {request.url.path}: {exc.message}")
    # 错误信息原样返回给调用方
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GatewayError, gateway_error_handler)
