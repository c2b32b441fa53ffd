# ============================================================================
# FILE: songbook/main.py
# ============================================================================
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from typing import Optional
from songbook.api.router import api_router
from songbook.config import Settings, settings as default_settings
from songbook.core.cache import RedisCache
from songbook.core.file_store import FileStore
from songbook.core.logging import setup_logging
from songbook.db.base import Base
from songbook.db.models import playlist, song  # noqa: F401  (register tables)
from songbook.db.session import build_engine, build_session_factory
import logging

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application and the resources its handlers share"""
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Audio upload catalog with playlists",
        version=VERSION,
        debug=settings.DEBUG
    )

    app.state.settings = settings
    app.state.engine = build_engine(settings.database_url)
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.file_store = FileStore(settings.UPLOAD_DIR)
    app.state.cache = RedisCache(settings.REDIS_URL)

    # Static mount needs the directory to exist up front
    app.state.file_store.ensure()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed requests are client errors (400), not 422"""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    app.include_router(api_router)

    # Serve uploaded files
    app.mount(
        settings.UPLOAD_URL_PREFIX,
        StaticFiles(directory=app.state.file_store.root),
        name="uploads"
    )

    @app.on_event("startup")
    async def startup_event():
        """Initialize storage on startup"""
        logger.info(f"Starting {settings.APP_NAME}")
        app.state.file_store.ensure()
        Base.metadata.create_all(bind=app.state.engine)

    @app.on_event("shutdown")
    async def shutdown_event():
        """Cleanup on shutdown"""
        logger.info(f"Shutting down {settings.APP_NAME}")
        app.state.engine.dispose()

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    @app.get("/")
    async def root():
        return {"message": settings.APP_NAME, "version": VERSION, "docs": "/docs"}

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
