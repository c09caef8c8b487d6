"""
Error handling for consistent API error responses.

All API errors render the flat error envelope:
{
    "error": "Human-readable message",
    "details": "Optional upstream payload or failure reason"
}
"""

from typing import Any

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse


class APIError(HTTPException):
    """Base API error class for consistent error responses."""

    include_details: bool = False

    def __init__(
        self,
        status_code: int,
        message: str,
        details: Any = None,
        headers: dict[str, str] | None = None,
    ):
        self.message = message
        self.details = details
        super().__init__(status_code=status_code, detail=message, headers=headers)

    def to_content(self) -> dict[str, Any]:
        content: dict[str, Any] = {"error": self.message}
        if self.include_details:
            content["details"] = self.details
        return content


class MissingParameterError(APIError):
    """Required query parameter absent or empty (400)."""

    def __init__(self, message: str):
        super().__init__(status_code=400, message=message)


class UpstreamFetchError(APIError):
    """Upstream call failed (500). Carries the upstream payload as details."""

    include_details = True

    def __init__(self, message: str, details: Any):
        super().__init__(status_code=500, message=message, details=details)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """
    FastAPI exception handler for APIError.

    Converts APIError exceptions to consistent JSON responses.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_content(),
        headers=exc.headers,
    )
