"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from notes_api.config import Settings, settings as default_settings
from notes_api.database import build_engine, build_session_factory
from notes_api.errors import register_exception_handlers, error_response
from notes_api.models import Base
from notes_api.routes.files import router as files_router
from notes_api.routes.notes import router as notes_router
from notes_api.services.file_storage import FileStorageService

logger = logging.getLogger(__name__)

# Room for multipart boundaries and the noteName field on top of the file itself
MULTIPART_OVERHEAD_BYTES = 64 * 1024


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API with its own store and uploads directory."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the store and blob directory on startup, close the store on shutdown."""
        engine = build_engine(settings.DATABASE_URL)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        app.state.file_storage = FileStorageService(settings.FILE_STORAGE_PATH)
        logger.info(
            "Notes API ready (database=%s, uploads=%s)",
            settings.DATABASE_URL,
            app.state.file_storage.base_path.resolve(),
        )

        yield

        await engine.dispose()

    app = FastAPI(
        title="Notes API",
        version="1.0.0",
        description="Plain-text notes with file attachments.",
        lifespan=lifespan,
    )
    app.state.settings = settings

    @app.middleware("http")
    async def limit_upload_size(request: Request, call_next):
        """Reject oversized bodies before they are parsed."""
        content_length = request.headers.get("content-length")
        limit = settings.MAX_UPLOAD_BYTES + MULTIPART_OVERHEAD_BYTES
        if content_length and content_length.isdigit() and int(content_length) > limit:
            return error_response(413, "File too large")
        return await call_next(request)

    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",")]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/health")
    async def health_check(request: Request):
        """Verify API and database connectivity."""
        try:
            async with request.app.state.session_factory() as db:
                await db.execute(text("SELECT 1"))
            return {"status": "ok", "database": "connected"}
        except Exception as e:
            return {"status": "error", "database": str(e)}

    app.include_router(notes_router)
    app.include_router(files_router)
    return app
