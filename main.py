# main.py
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from containers import Container
from dtos import HealthDTO
from exceptions import ChatAppError
from endpoints.api_auth import router as api_auth_router
from endpoints.api_settings import router as api_settings_router
from endpoints.api_conversations import router as api_conversations_router
from endpoints.api_messages import router as api_messages_router

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    database = app.container.database()
    await database.init_db()
    logger.info("%s started", app.container.settings().app_name)
    try:
        yield
    finally:
        # uvicorn доходит сюда и по SIGTERM, соединение закрывается до выхода процесса
        await database.dispose()


def create_app(container: Optional[Container] = None) -> FastAPI:
    container = container or Container()
    settings = container.settings()

    app = FastAPI(title=settings.app_name, version=settings.version, lifespan=lifespan)
    app.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    @app.exception_handler(ChatAppError)
    async def chat_app_error_handler(request: Request, exc: ChatAppError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "error_code": exc.error_code},
        )

    @app.get("/", response_model=HealthDTO)
    async def health():
        return HealthDTO(
            status="OK",
            message=settings.app_name,
            version=settings.version,
            timestamp=datetime.now(timezone.utc),
        )

    app.include_router(api_auth_router)
    app.include_router(api_settings_router)
    app.include_router(api_conversations_router)
    app.include_router(api_messages_router)

    return app


def main() -> None:
    container = Container()
    settings = container.settings()
    setup_logging(settings.log_level)
    logger.info("Database: %s", settings.database_path)
    app = create_app(container)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
