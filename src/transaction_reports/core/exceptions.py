"""Errors surfaced to API clients as plain-text responses."""

from fastapi import Request, status
from fastapi.responses import PlainTextResponse


class ReportingError(Exception):
    """A failed store, fetch or composition step.

    Carries the generic message shown to the caller; the underlying cause is
    logged where it is caught and chained via ``raise ... from``.
    """

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


async def reporting_error_handler(request: Request, exc: ReportingError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)
