# backend/core/errors.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class InterviewAccessError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class Unauthorized(InterviewAccessError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized"


class Forbidden(InterviewAccessError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Forbidden"


class NotFound(InterviewAccessError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class Conflict(InterviewAccessError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict"


class InvalidStatus(InterviewAccessError):
    status_code = 422
    default_detail = "Status not allowed"


async def _access_error_handler(request: Request, exc: InterviewAccessError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InterviewAccessError, _access_error_handler)
