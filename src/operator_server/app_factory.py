import logging
import time
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import config_manager, settings
from src.operator_server.api import chat, routes, sessions
from src.operator_server.state import AppState

logger = logging.getLogger("operator.server.factory")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup the application."""
    logger.info("Browser operator server starting up...")
    config_manager.load_config()

    if getattr(app.state, "app_state", None) is None:
        app.state.app_state = AppState()

    logger.info("Browser operator server ready")

    yield

    logger.info("Browser operator server shutting down...")
    await app.state.app_state.shutdown()


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app.name, version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from .api.exception_handlers import global_exception_handler
    app.add_exception_handler(Exception, global_exception_handler)

    # Request Logging Middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable):
        start_time = time.time()
        response = await call_next(request)
        process_time = (time.time() - start_time) * 1000
        logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.2f}ms")
        return response

    app.include_router(routes.router)
    app.include_router(sessions.router)
    app.include_router(chat.router)

    return app
