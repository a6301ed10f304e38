import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from bulletin.config import settings
from bulletin.database import engine
from bulletin.errors import register_exception_handlers
from bulletin.logging_config import configure_logging
from bulletin.middleware import RequestMetricsMiddleware
from bulletin.routers import events, posts

VERSION = "1.0.0"

logger = logging.getLogger(__name__)

_ROUTERS = {
    "articles": posts.router,
    "events": events.router,
}

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging(settings.LOG_LEVEL)
    logger.info("Serving %s", ", ".join(app.state.services))
    yield
    # Shutdown: release pooled connections
    await engine.dispose()


def create_app(services: list[str] | None = None) -> FastAPI:
    """Build the application, mounting only the resource APIs named in *services*."""
    services = list(settings.SERVICES if services is None else services)
    unknown = set(services) - set(_ROUTERS)
    if unknown:
        raise ValueError(f"Unknown services: {', '.join(sorted(unknown))}")

    app = FastAPI(
        title="Bulletin API",
        description="Article and event resource services",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.services = services

    app.add_middleware(RequestMetricsMiddleware)
    register_exception_handlers(app)

    for name in services:
        app.include_router(_ROUTERS[name])

    @app.get("/health")
    async def health():
        return {"status": "healthy", "version": VERSION}

    return app


app = create_app()


def run() -> None:
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
