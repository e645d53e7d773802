from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from leavedesk.models.enums import LeaveErrorCode


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str
    code: str | None = None
    detail: str | None = None
    status_code: int


class AppError(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


_ERROR_MESSAGES: dict[LeaveErrorCode, str] = {
    LeaveErrorCode.EMPLOYEE_NOT_FOUND: "Employee not found",
    LeaveErrorCode.REQUEST_NOT_FOUND: "Leave request not found",
    LeaveErrorCode.PAST_DATE: "Cannot apply for leave in the past",
    LeaveErrorCode.INVALID_RANGE: "End date must be after or equal to start date",
    LeaveErrorCode.DATE_OVERLAP: "Leave dates overlap with existing approved request",
    LeaveErrorCode.INSUFFICIENT_BALANCE: "Insufficient leave balance",
    LeaveErrorCode.ALREADY_PROCESSED: "Leave request has already been processed",
    LeaveErrorCode.INVALID_ACTION: "Invalid action. Must be approve or reject",
}

_ERROR_STATUS: dict[LeaveErrorCode, int] = {
    LeaveErrorCode.EMPLOYEE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    LeaveErrorCode.REQUEST_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    LeaveErrorCode.DATE_OVERLAP: status.HTTP_409_CONFLICT,
    LeaveErrorCode.ALREADY_PROCESSED: status.HTTP_409_CONFLICT,
}


class LeaveError(AppError):
    """A leave business-rule failure identified by its error code."""

    def __init__(self, code: LeaveErrorCode, message: str | None = None) -> None:
        self.code = code
        super().__init__(
            message or _ERROR_MESSAGES[code],
            status_code=_ERROR_STATUS.get(code, status.HTTP_400_BAD_REQUEST),
        )


async def _app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=type(exc).__name__,
            code=getattr(exc, "code", None),
            detail=exc.message,
            status_code=exc.status_code,
        ).model_dump(),
    )


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(
            error="ValidationError",
            detail=str(exc.errors()),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        ).model_dump(),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application."""
    app.add_exception_handler(AppError, _app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)  # type: ignore[arg-type]
