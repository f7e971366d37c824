import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from gym_api.core.config import CORS_HEADERS, Settings, settings
from gym_api.core.db import init_db
from gym_api.core.errors import GymApiError
from gym_api.core.log import configure_logging

from gym_api.api.routes_health import router as health_router
from gym_api.api.routes_sessions import router as sessions_router
from gym_api.api.routes_stats import router as stats_router

logger = logging.getLogger(__name__)

async def api_error_handler(request: Request, exc: GymApiError):
    logger.warning("%s %s rejected (%d): %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse({"ok": False, "error": exc.message}, status_code=exc.status_code)

async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # unknown paths and known paths hit with the wrong method look the same to clients
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not found", status_code=404)
    return JSONResponse({"ok": False, "error": str(exc.detail)}, status_code=exc.status_code)

def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    configure_logging(app_settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(app_settings.db_path)
        logger.info("%s started", app_settings.service_name)
        yield
        logger.info("%s stopped", app_settings.service_name)

    # "/health/" is an unknown path, not a redirect to "/health"
    app = FastAPI(title=app_settings.app_title, lifespan=lifespan, redirect_slashes=False)
    app.state.settings = app_settings

    @app.middleware("http")
    async def cors(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    app.add_exception_handler(GymApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.include_router(health_router)
    app.include_router(sessions_router)
    app.include_router(stats_router)

    return app

app = create_app()
