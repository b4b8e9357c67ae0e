# pawmart/errors.py
"""Exception handlers that render every error as `{"message": ...}`."""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from .utils import logger

# only request bodies can fail validation; query and path params are plain strings
_BODY_FAILURES = {
    ("POST", "listings"): "Failed to create listing",
    ("PUT", "listings"): "Failed to update listing",
    ("POST", "orders"): "Failed to create order",
}

def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # unusable bodies fail at the store, so they answer like a store error
        logger.warning("Rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
        collection = request.url.path.strip("/").split("/")[0]
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": _BODY_FAILURES.get((request.method, collection), "Invalid request")},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )
