import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.api.v1 import catalog, reference, sizing
from app.core.logging import RequestLoggingMiddleware, setup_logging

from engine.sizing.config import FORMULA_VERSION
from engine.sizing.errors import InvalidInputError

logger = logging.getLogger(__name__)


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.info(
        "Rejected sizing input: %s",
        exc,
        extra={"field": exc.field, "path": str(request.url.path)},
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc), "field": exc.field},
    )


def create_app() -> FastAPI:
    setup_logging(
        json_format=settings.log_json,
        level="DEBUG" if settings.debug else settings.log_level,
    )

    application = FastAPI(
        title=settings.app_name,
        version="0.1.0",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(RequestLoggingMiddleware)
    application.add_exception_handler(InvalidInputError, invalid_input_handler)

    application.include_router(sizing.router, prefix="/api/v1/sizing", tags=["sizing"])
    application.include_router(reference.router, prefix="/api/v1/reference", tags=["reference"])
    application.include_router(catalog.router, prefix="/api/v1/catalog", tags=["catalog"])

    @application.get("/health")
    async def health_check() -> dict:
        # Report misconfigured sizing defaults
        try:
            settings.sizing_config()
        except InvalidInputError as e:
            return {"status": "degraded", "formula_version": FORMULA_VERSION, "config": f"error: {e}"}
        return {"status": "ok", "formula_version": FORMULA_VERSION, "config": "ok"}

    return application


app = create_app()
