"""
Praise Board - Main Server

- Login against a static credential table (JWT session cookie)
- Praise CRUD over an in-memory, position-addressed list
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from loguru import logger

from .auth import CredentialStore
from .config import Settings, settings as default_settings
from .core.exceptions import PraiseBoardException
from .pages import render_error
from .routes_auth import router as auth_router
from .routes_praises import router as praises_router
from .schemas import HealthResponse
from .store import PraiseStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the praise store for the lifetime of the app."""
    app.state.praise_store = PraiseStore()
    logger.info("Praise Board started")
    yield
    app.state.praise_store.clear()
    logger.info("Praise Board shutting down")


async def praiseboard_exception_handler(request: Request, exc: PraiseBoardException) -> HTMLResponse:
    return HTMLResponse(render_error(exc), status_code=exc.status_code)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or default_settings

    app = FastAPI(
        title="Praise Board",
        description="Cookie-authenticated praise bulletin board",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.credentials = CredentialStore(settings.USERS)

    app.add_exception_handler(PraiseBoardException, praiseboard_exception_handler)

    app.include_router(auth_router)
    app.include_router(praises_router)

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health_check(request: Request):
        """Health check endpoint."""
        return HealthResponse(entries=len(request.app.state.praise_store))

    return app


# Create app instance
app = create_app()


def run(
    host: Optional[str] = None,
    port: Optional[int] = None,
    reload: bool = False,
):
    """Run the praise board server."""
    import uvicorn

    if host is None:
        host = default_settings.HOST
    if port is None:
        port = default_settings.PORT

    logger.info(f"Starting Praise Board on {host}:{port}")
    uvicorn.run(
        "praiseboard.server:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    run()
