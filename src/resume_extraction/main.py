from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from resume_extraction.api.errors import request_validation_handler
from resume_extraction.api.v1.router import api_v1_router
from resume_extraction.core.config import get_settings
from resume_extraction.core.logging_config import configure_logging


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(api_v1_router, prefix="/api/v1")
    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "resume_extraction.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )
