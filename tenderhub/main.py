from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# every mapper must be registered before any router module builds a query
from tenderhub.models import registry  # noqa: F401
from tenderhub.api.v1 import routes
from tenderhub.core.config import settings
from tenderhub.core.errors import AppError
from tenderhub.core.logging_config import logger
from tenderhub.schemas.common import fail, ok


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    error = errors[0]
    field = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
    message = error.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


def setup_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(content=fail(exc.message), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(content=fail(_first_validation_message(exc)), status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(content=fail(str(exc.detail)), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(content=fail("Internal server error"), status_code=500)


def create_app() -> FastAPI:
    app = FastAPI(title="TenderHub API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    setup_exception_handlers(app)
    app.include_router(routes.router)

    @app.get("/health", tags=["Health"])
    async def health():
        return ok({
            "status": "OK",
            "message": "TenderHub API is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })

    return app


app = create_app()
