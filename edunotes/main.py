from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from edunotes import __version__
from edunotes.api.v1 import auth, bookmarks, feedback, notes, notifications, profiles
from edunotes.core.config import Settings, settings as default_settings
from edunotes.core.logging import get_logger, setup_logging
from edunotes.services.portal import Portal
from edunotes.utils.error_handler import setup_exception_handlers

logger = get_logger(__name__)


def create_app(config: Optional[Settings] = None) -> FastAPI:
    config = config or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(config)
        logger.info("Starting EduNotes API")
        app.state.portal = Portal.open(config)
        if not app.state.portal.store.available:
            logger.warning("API will continue without persistent storage")

        yield

        app.state.portal.close()
        logger.info("Shutting down EduNotes API")

    app = FastAPI(
        lifespan=lifespan,
        title="EduNotes API",
        description="Semester-gated study materials, notifications and feedback",
        version=__version__,
    )

    setup_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    #api routes
    app.include_router(auth.router, prefix="/api/v1/auth", tags=["Authentication"])
    app.include_router(notes.router, prefix="/api/v1/notes", tags=["Notes"])
    app.include_router(bookmarks.router, prefix="/api/v1/bookmarks", tags=["Bookmarks"])
    app.include_router(notifications.router, prefix="/api/v1/notifications", tags=["Notifications"])
    app.include_router(feedback.router, prefix="/api/v1/feedback", tags=["Feedback"])
    app.include_router(profiles.router, prefix="/api/v1/profiles", tags=["Profiles"])

    @app.get("/health")
    async def health_check():
        portal = getattr(app.state, "portal", None)
        return {
            "status": "ok",
            "storage": portal.store.backend if portal else None,
            "storage_available": bool(portal and portal.store.available),
        }

    return app


app = create_app()
