import logging
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request

from app.api.hello import router as hello_router
from app.api.weather import router as weather_router
from app.errors import register_error_handlers
from app.service.weather_service import WeatherClient
from app.settings import GatewaySettings

logging.basicConfig(level=GatewaySettings.from_env().log_level.upper())
logger = logging.getLogger(__name__)


def create_app(
        settings: Optional[GatewaySettings] = None,
        weather_client: Optional[WeatherClient] = None
) -> FastAPI:
    """创建一个独立的网关实例，测试里可以同时建多个"""
    settings = settings or GatewaySettings.from_env()

    app = FastAPI(title="Weather Gateway")
    app.state.settings = settings
    app.state.weather_client = weather_client or WeatherClient(settings)

    # 注册路由
    app.include_router(hello_router)
    app.include_router(weather_router)
    register_error_handlers(app)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            logger.info(
                f"{request.method} {request.url.path} | "
                f"响应状态: {response.status_code} | 耗时: {process_time:.4f}s"
            )
            return response
        except Exception as e:
            logger.error(f"请求处理异常: {e}")
            raise

    return app


app = create_app()


def run(settings: Optional[GatewaySettings] = None) -> None:
    settings = settings or app.state.settings
    logging.getLogger().setLevel(settings.log_level.upper())
    logger.info(f"🚀 网关启动: http://{settings.host}:{settings.port}")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
