"""
common.exceptions
~~~~~~~~~~~~~~~~~
Centralised DRF exception handler and custom exception classes.

Every error returned to a client uses the same envelope::

    {"name": "<error name>", "message": "<human text>", "error": <detail>}
"""
from __future__ import annotations

import structlog
from rest_framework import status
from rest_framework.exceptions import ParseError, UnsupportedMediaType, ValidationError
from rest_framework.response import Response
from rest_framework.settings import api_settings
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)

INVALID_BODY = "invalid_body"
INVALID_BODY_MESSAGE = "Cannot parse body as JSON"


class AppError(Exception):
    """Base application error.  Subclass to define domain-specific errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_name: str = "error"
    default_message: str = "An error occurred."

    def __init__(
        self,
        error: str | None = None,
        *,
        message: str | None = None,
        name: str | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.name = name or self.default_name
        self.error = error or self.message
        super().__init__(self.error)

    def __str__(self) -> str:
        return self.error

    def as_payload(self) -> dict:
        return {"name": self.name, "message": self.message, "error": self.error}


class MalformedBodyError(AppError):
    """The request body is not JSON or does not have the expected shape."""

    default_name = INVALID_BODY
    default_message = INVALID_BODY_MESSAGE


class InvalidSourceFormatError(MalformedBodyError):
    """A ``source`` object matches neither known code source variant."""


class ApplicationValidationError(MalformedBodyError):
    """
    Required fields are missing or invalid.

    Attributes:
        fields (list[dict]): ``{"field": ..., "message": ...}`` per problem.
    """

    default_message = "Required fields are missing or invalid."

    def __init__(self, fields: list[dict]) -> None:
        self.fields: list[dict] = fields
        names = ", ".join(f["field"] for f in fields)
        super().__init__(f"missing or invalid fields: {names}")

    def as_payload(self) -> dict:
        payload = super().as_payload()
        payload["invalid_fields"] = self.fields
        return payload


class DuplicateApplicationError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_name = "duplicate_application"
    default_message = "An application with that name already exists."


def _flatten_detail(detail, path: str = "") -> list[dict]:
    """Turn nested serializer errors into ``{"field", "message"}`` dicts."""
    if isinstance(detail, dict):
        errors = []
        for key, value in detail.items():
            if key == api_settings.NON_FIELD_ERRORS_KEY:
                key = "body"
            errors.extend(_flatten_detail(value, f"{path}.{key}" if path else str(key)))
        return errors
    if isinstance(detail, list):
        return [error for item in detail for error in _flatten_detail(item, path)]
    return [{"field": path or "body", "message": str(detail)}]


def custom_exception_handler(exc: Exception, context: dict) -> Response | None:
    """
    Global DRF exception handler.
    Converts AppError subclasses, body parsing failures and serializer
    validation errors to the error envelope and delegates everything else to
    the default DRF handler so standard DRF exceptions still work.
    """
    if isinstance(exc, (ParseError, UnsupportedMediaType)):
        exc = MalformedBodyError(str(exc.detail))
    elif isinstance(exc, ValidationError):
        exc = ApplicationValidationError(_flatten_detail(exc.detail))

    if isinstance(exc, AppError):
        logger.warning(
            "app_error",
            name=exc.name,
            error=exc.error,
            status_code=exc.status_code,
        )
        return Response(exc.as_payload(), status=exc.status_code)

    response = drf_exception_handler(exc, context)
    if response is not None:
        logger.warning(
            "drf_error",
            detail=response.data,
            status_code=response.status_code,
        )
    else:
        logger.exception("unhandled_exception", exc_info=exc)

    return response
