"""Typed errors raised by repositories and services; mapped to HTTP in api.errors."""

from __future__ import annotations


class IronTrackError(Exception):
    """Base for every error the API knows how to shape."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"message": self.message}


class ValidationError(IronTrackError):
    """Malformed or constraint-violating input (includes duplicate unique names)."""

    status_code = 400

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.field:
            body["field"] = self.field
        return body


class ImportFormatError(ValidationError):
    """Backup document with a bad shape or an unsupported version."""


class NotFoundError(IronTrackError):
    status_code = 404


class InternalError(IronTrackError):
    """Unexpected failure; the cause is logged, never returned to the caller."""

    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
