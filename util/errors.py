# util/errors.py
from typing import Any
from fastapi import HTTPException, status


class AppError(HTTPException):
    # Flow: raise AppError to short-circuit with a typed status & message.
    def __init__(
        self, message: str, http_status: int = status.HTTP_400_BAD_REQUEST
    ) -> None:
        super().__init__(status_code=http_status, detail=message)


class ContentError(Exception):
    """Base for failures inside the content and export layers. Never shown to users."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = " ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class ConfigurationError(ContentError):
    """No access credential is configured for the generative service."""


class UpstreamError(ContentError):
    """Transport failure, non-2xx reply, or a body that breaks the response contract."""


class ExportError(ContentError):
    """Document rendering failed."""
