"""
Exception handling for the registry API.
"""

import logging
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from coverage_registry.access import AccessError, AuthorizationError
from coverage_registry.ledger import LedgerError, NotFoundError
from coverage_registry.pricing import InvalidReferenceError, PriceFeedError, PricingError
from .responses import ErrorResponse, ResponseStatus

logger = logging.getLogger(__name__)

# Most specific classes first; the first isinstance match wins
ERROR_STATUS = (
    (AuthorizationError, 403, "FORBIDDEN"),
    (NotFoundError, 404, "NOT_FOUND"),
    (InvalidReferenceError, 422, "INVALID_REFERENCE_PRICE"),
    (PriceFeedError, 502, "EXTERNAL_SERVICE_ERROR"),
)


def resolve_error_status(exc: Exception):
    for error_type, status_code, code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code, code
    return 500, "INTERNAL_SERVER_ERROR"


def error_details(exc: Exception) -> dict:
    details = {}
    if isinstance(exc, AuthorizationError):
        details = {"identity": exc.identity, "required_role": exc.required_role}
    elif isinstance(exc, NotFoundError):
        if exc.resource_type:
            details["resource_type"] = exc.resource_type
        if exc.resource_id is not None:
            details["resource_id"] = exc.resource_id
    elif isinstance(exc, InvalidReferenceError):
        details = {"price": exc.price}
    return details


def setup_exception_handlers(app):
    """Setup exception handlers for the FastAPI app"""

    async def domain_exception_handler(request: Request, exc: Exception):
        """Handle registry domain exceptions"""
        status_code, code = resolve_error_status(exc)
        logger.warning(f"Registry Exception: {exc} (Code: {code})", extra={
            "exception_type": exc.__class__.__name__,
            "code": code,
            "path": request.url.path,
            "method": request.method
        })

        error_response = ErrorResponse(
            status=ResponseStatus.ERROR,
            message=str(exc),
            code=code,
            details=error_details(exc)
        )

        return JSONResponse(
            status_code=status_code,
            content=error_response.model_dump()
        )

    for base_error in (AccessError, LedgerError, PricingError):
        app.add_exception_handler(base_error, domain_exception_handler)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle Pydantic validation errors"""
        logger.warning(f"Validation Error: {exc.errors()}", extra={
            "path": request.url.path,
            "method": request.method
        })

        field_errors = []
        for error in exc.errors():
            field_path = " -> ".join(str(loc) for loc in error["loc"])
            field_errors.append(f"{field_path}: {error['msg']}")

        error_response = ErrorResponse(
            status=ResponseStatus.ERROR,
            message="Validation failed",
            errors=field_errors,
            code="VALIDATION_ERROR"
        )

        return JSONResponse(
            status_code=422,
            content=error_response.model_dump()
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions"""
        logger.warning(f"HTTP Exception: {exc.detail}", extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "method": request.method
        })

        error_response = ErrorResponse(
            status=ResponseStatus.ERROR,
            message=str(exc.detail),
            code=f"HTTP_{exc.status_code}"
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=error_response.model_dump()
        )
