# taskboss/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboss.api.api import api_router
from taskboss.core.config import settings
from taskboss.core.logging import setup_logging
from taskboss.core.error_handlers import register_exception_handlers
from taskboss.core.middleware import register_middlewares
from taskboss.db.session import init_db
from taskboss.services import register_services

# Set up the logger at the start
logger = setup_logging()


# Context manager for startup/shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting TaskBoss API {app.version} ({settings.ENVIRONMENT})")

    # Create tables and apply migrations
    init_db()

    # Register services
    register_services()
    logger.info("Services registered")

    yield

    logger.info("Shutting down application")


app = FastAPI(
    title="TaskBoss API",
    description="API for a gamified task and goal tracker with AI assistance",
    version="1.0.0",
    lifespan=lifespan,
)

# Register custom exception handlers
register_exception_handlers(app)

# Register middleware
register_middlewares(app)

# Set up CORS middleware
if settings.BACKEND_CORS_ORIGINS:
    allowed_origins = [str(origin) for origin in settings.BACKEND_CORS_ORIGINS]
    logger.info(f"Setting up CORS with allowed origins: {allowed_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(api_router, prefix=settings.API_PREFIX)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
