"""Reservation service errors and their HTTP translation"""

from typing import List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

logger = structlog.get_logger()


class ReservationServiceError(Exception):
    """Base class for errors that map to a client-facing response"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ReservationServiceError):
    """Structurally malformed input"""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


class BusinessRuleViolation(ReservationServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class TableNotFound(BusinessRuleViolation):
    def __init__(self, table_id: int):
        self.table_id = table_id
        super().__init__(f"Table {table_id} not found or unavailable")


class TableInactive(BusinessRuleViolation):
    def __init__(self, table_id: int):
        self.table_id = table_id
        super().__init__(f"Table {table_id} is not active")


class CapacityExceeded(BusinessRuleViolation):
    def __init__(self, guest_count: int, seating_capacity: int):
        self.guest_count = guest_count
        self.seating_capacity = seating_capacity
        super().__init__(
            f"Guest count ({guest_count}) exceeds table capacity ({seating_capacity})"
        )


class ConflictError(ReservationServiceError):
    status_code = status.HTTP_409_CONFLICT


class DoubleBooking(ConflictError):
    def __init__(self):
        super().__init__("This table is already booked for the requested date and time slot")


class NotFoundError(ReservationServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class CancellationRuleViolation(ReservationServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class AlreadyCancelled(CancellationRuleViolation):
    def __init__(self):
        super().__init__("Reservation is already cancelled")


class CancellationWindowViolation(CancellationRuleViolation):
    def __init__(self):
        super().__init__(
            "Reservations can only be cancelled at least 1 hour before the reserved time"
        )


class InternalError(ReservationServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


INTERNAL_ERROR_MESSAGE = "Internal server error"


def _format_validation_error(error: dict) -> str:
    """Render a pydantic error as 'field: message'"""
    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    message = error.get("msg", "Invalid value")
    if location:
        return f"{'.'.join(location)}: {message}"
    return message


async def service_error_handler(request: Request, exc: ReservationServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Service error", path=request.url.path, error=exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": INTERNAL_ERROR_MESSAGE})

    logger.info(
        "Request rejected",
        path=request.url.path,
        status_code=exc.status_code,
        reason=type(exc).__name__,
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Validation failed", path=request.url.path, errors=exc.errors)
    return JSONResponse(status_code=exc.status_code, content={"errors": exc.errors})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [_format_validation_error(error) for error in exc.errors()]
    logger.info("Validation failed", path=request.url.path, errors=errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


# Handlers are resolved along the exception MRO
EXCEPTION_HANDLERS = {
    ValidationError: validation_error_handler,
    ReservationServiceError: service_error_handler,
    RequestValidationError: request_validation_error_handler,
    Exception: unhandled_error_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
