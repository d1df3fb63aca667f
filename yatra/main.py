"""
FastAPI Application Entry Point.
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse
from pathlib import Path
from typing import Optional
import logging

from .api import router
from .config import Settings, settings as default_settings
from .core import register_exception_handlers, setup_logging
from .services.storage import MemStorage, Storage

logger = logging.getLogger(__name__)

DEFAULT_FRONTEND_DIR = Path(__file__).parent.parent / "frontend"


def create_app(
    storage: Optional[Storage] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the application around a single store instance."""
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.app_name,
        description="Catalog and contact API for the pilgrimage tours site",
        version="1.0.0",
        debug=settings.debug,
    )

    app.state.storage = storage if storage is not None else MemStorage(seed=settings.seed_data)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(router)

    @app.get("/health")
    async def health_check(request: Request):
        """Health check endpoint."""
        return {
            "status": "healthy",
            "collections": request.app.state.storage.counts(),
        }

    # Serve the built frontend if present
    frontend_dir = Path(settings.frontend_dir) if settings.frontend_dir else DEFAULT_FRONTEND_DIR
    if frontend_dir.exists():
        app.mount("/static", StaticFiles(directory=str(frontend_dir)), name="static")

        @app.get("/")
        async def serve_frontend():
            """Serve the frontend."""
            return FileResponse(str(frontend_dir / "index.html"))

        logger.info(f"Serving frontend from {frontend_dir}")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "yatra.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug
    )
