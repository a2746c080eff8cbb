from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import settings
from app.infrastructure.logging import configure_logging, get_logger
from app.interfaces.api.error_handlers import install_error_handlers
from app.interfaces.api.v1.router import api_router

logger = get_logger(__name__)

OPENAPI_DESCRIPTION = """
API whose failures are all reported through one error envelope.

Error bodies:
- Field validation errors: `status`, `message` and an ordered `details` list of `{field, message}`.
- Basic application errors: `status` and `message`.
- Complete application errors: `status`, `message`, `details` (the cause message), `path` and `timestamp`.
"""

OPENAPI_TAGS = [
    {"name": "health", "description": "Service health checks."},
]


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    logger.info("app_startup", app_name=settings.app_name, version=settings.app_version)
    yield
    logger.info("app_shutdown", app_name=settings.app_name)


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=OPENAPI_DESCRIPTION,
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
)

install_error_handlers(app)


@app.get("/")
def root():
    return {"message": f"{settings.app_name} is running"}


app.include_router(api_router)
