import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .database import dispose_db, init_db
from .routers import auth, requests, settings as queue_settings, users

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    await init_db()
    yield
    await dispose_db()


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.cors_origins],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router, prefix=settings.api_prefix)
    app.include_router(users.router, prefix=settings.api_prefix)
    app.include_router(requests.router, prefix=settings.api_prefix)
    app.include_router(queue_settings.router, prefix=settings.api_prefix)

    @app.get("/healthz")
    async def healthcheck():
        return {"status": "ok"}

    @app.exception_handler(StarletteHTTPException)
    async def api_not_found(request: Request, exc: StarletteHTTPException):
        # only unmatched routes; a 404 raised by a handler keeps its detail
        unmatched = request.scope.get("route") is None
        if exc.status_code == 404 and unmatched and request.url.path.startswith(settings.api_prefix):
            logger.warning("API route not found: %s %s", request.method, request.url.path)
            return JSONResponse(status_code=404, content={"msg": "API route not found"})
        return await http_exception_handler(request, exc)

    return app


app = create_app()
