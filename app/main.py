import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.errors import ForecastError, RETRY_LATER_MESSAGE
from app.core.logging import configure_logging
from app.data.cities import supported_city_ids
from app.models.weather import HealthResponse, ServiceInfo
from app.api.routes.weather import router as weather_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    logger.info("%s starting (env=%s)", settings.app_name, settings.env)
    if not settings.cwa_api_key:
        logger.warning("CWA_API_KEY is not set; /api/weather requests will fail with 500")
    yield


def _requested(request: Request) -> str:
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    return f"{request.method} {path}"


async def forecast_error_handler(request: Request, exc: ForecastError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # unknown path, or known path with a method it does not serve
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={"error": "找不到此路徑", "message": f"您請求的路徑: {_requested(request)} 不存在"},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "伺服器錯誤", "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )

async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", _requested(request))
    return JSONResponse(
        status_code=500,
        content={"error": "伺服器錯誤", "message": RETRY_LATER_MESSAGE},
    )


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ForecastError, forecast_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/", response_model=ServiceInfo)
    async def index():
        return ServiceInfo(
            message="歡迎使用 CWA 天氣預報代理 API",
            endpoints={
                "weather": f"/api/weather/:cityId (支援: {', '.join(supported_city_ids())})",
                "health": "/api/health",
            },
        )

    @app.get("/api/health", response_model=HealthResponse)
    async def health():
        now = datetime.now(timezone.utc)
        return HealthResponse(
            status="OK",
            timestamp=now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        )

    app.include_router(weather_router, prefix="/api", tags=["weather"])

    return app

app = create_app()
