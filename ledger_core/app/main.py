import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.exceptions import register_exception_handlers
from .api.routes import account_router, student_router, transfer_router
from .core.config import Settings, get_settings
from .core.db import Database

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(
            settings.database_url,
            echo=settings.sql_echo,
            busy_timeout=settings.sqlite_busy_timeout,
        )
        database.init()
        app.state.database = database
        try:
            yield
        finally:
            database.dispose()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.include_router(student_router)
    app.include_router(account_router)
    app.include_router(transfer_router)
    register_exception_handlers(app)

    @app.get("/health")
    def read_health() -> dict[str, str]:
        return {"status": "ok"}

    return app

app = create_app()
