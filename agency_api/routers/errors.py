from __future__ import annotations

from fastapi import Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from agency_api.domain.errors import AccountError, MissingFields, NoUpdatableFields


def error_response(status_code: int, exc: AccountError) -> JSONResponse:
    """Error body shared by every JSON route: ``{"error": <message>}``."""
    return JSONResponse({"error": exc.message}, status_code=status_code)


async def body_validation_handler(request: Request, exc: RequestValidationError):
    """Absent, non-object or mistyped request bodies answer 400 like the services do.

    Writes with an unusable body carry no fields: POST reports MissingFields and
    PUT reports NoUpdatableFields. Path and query errors keep FastAPI's 422.
    """
    errors = exc.errors()
    if errors and all(tuple(error.get("loc", ()))[:1] == ("body",) for error in errors):
        if request.method == "PUT":
            return error_response(400, NoUpdatableFields())
        return error_response(400, MissingFields())
    return await request_validation_exception_handler(request, exc)
