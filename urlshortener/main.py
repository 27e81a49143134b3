from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import uvicorn

from urlshortener.core.config import Settings, settings
from urlshortener.api import shortener
from urlshortener.core.logging_config import configure_logging
from urlshortener.services.shortener import URLShortener

logger = configure_logging(settings.LOG_LEVEL)


def _validation_message(exc: RequestValidationError) -> str:
    for error in exc.errors():
        loc = tuple(error.get("loc", ()))
        kind = error.get("type")
        if kind in ("json_invalid", "extra_forbidden") or (kind == "missing" and loc == ("body",)):
            return "error reading http request body"
        if loc[-1:] == ("url",) and kind in ("missing", "string_too_short"):
            return "http request body doesn't contain url param"
    return "invalid url passed in request"


def create_app(app_settings: Settings = settings) -> FastAPI:
    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        description="Minimal in-memory URL Shortener Service"
    )

    # One store per application, handed to handlers through get_shortener
    app.state.shortener = URLShortener(
        hostname=app_settings.SHORT_URL_HOSTNAME,
        length=app_settings.SHORT_CODE_LENGTH,
        scheme=app_settings.SHORT_URL_SCHEME,
    )
    app.state.settings = app_settings

    app.include_router(shortener.router, prefix="")

    @app.get("/health", tags=["health"])
    def health_check():
        return {"status": "healthy", "service": "url-shortener"}

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        detail = _validation_message(exc)
        logger.warning(f"Rejected {request.method} {request.url.path}: {detail}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        detail = exc.detail
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            detail = f"Invalid http operation {request.method}"
        return JSONResponse(status_code=exc.status_code, content={"detail": detail}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    logger.info(
        "Application '%s' ready, short URLs under %s://%s/ (code length %d)",
        app_settings.PROJECT_NAME,
        app_settings.SHORT_URL_SCHEME,
        app_settings.SHORT_URL_HOSTNAME,
        app_settings.SHORT_CODE_LENGTH,
    )
    return app


app = create_app()


def run():
    logger.info(f"Server starting on {settings.HOST} {settings.PORT} ...")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
