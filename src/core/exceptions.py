"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

    # Not found errors (404)
    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
    CERTIFICATION_NOT_FOUND = "CERTIFICATION_NOT_FOUND"
    SERVICE_NOT_FOUND = "SERVICE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UPLOAD_REJECTED = "UPLOAD_REJECTED"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    STORAGE_ERROR = "STORAGE_ERROR"
    MEDIA_CLEANUP_FAILED = "MEDIA_CLEANUP_FAILED"

    # Collaborator unavailable (503)
    EMAIL_SERVICE_UNAVAILABLE = "EMAIL_SERVICE_UNAVAILABLE"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class ValidationError(AppException):
    """Structurally invalid input: unknown or duplicate ids, count mismatch, missing fields."""

    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=400,
            details=details,
        )


class NotFoundError(AppException):
    """Target record does not exist."""

    def __init__(self, error_code: ErrorCode, entity: str, record_id: str) -> None:
        super().__init__(
            error_code=error_code,
            message=f"{entity} not found: {record_id}",
            status_code=404,
            details={"id": record_id},
        )


class ProjectNotFoundError(NotFoundError):
    def __init__(self, project_id: str) -> None:
        super().__init__(ErrorCode.PROJECT_NOT_FOUND, "Project", project_id)


class CertificationNotFoundError(NotFoundError):
    def __init__(self, certification_id: str) -> None:
        super().__init__(ErrorCode.CERTIFICATION_NOT_FOUND, "Certification", certification_id)


class ServiceNotFoundError(NotFoundError):
    def __init__(self, service_id: str) -> None:
        super().__init__(ErrorCode.SERVICE_NOT_FOUND, "Service", service_id)


class StorageError(AppException):
    """The persistence collaborator failed."""

    def __init__(self, message: str = "Storage operation failed") -> None:
        super().__init__(
            error_code=ErrorCode.STORAGE_ERROR,
            message=message,
            status_code=500,
        )


class MediaCleanupFailure(AppException):
    """A stored media object could not be deleted. Logged, never surfaced."""

    def __init__(self, reference: str, reason: str) -> None:
        super().__init__(
            error_code=ErrorCode.MEDIA_CLEANUP_FAILED,
            message=f"Failed to delete media {reference}: {reason}",
            status_code=500,
            details={"reference": reference},
        )


class EmailServiceUnavailableError(AppException):
    """Outbound mail is not configured or the relay rejected the message."""

    def __init__(self, message: str = "Email service unavailable") -> None:
        super().__init__(
            error_code=ErrorCode.EMAIL_SERVICE_UNAVAILABLE,
            message=message,
            status_code=503,
        )


class UploadRejectedError(AppException):
    """Uploaded file has a disallowed type or size."""

    def __init__(self, message: str, filename: str = "") -> None:
        super().__init__(
            error_code=ErrorCode.UPLOAD_REJECTED,
            message=message,
            status_code=400,
            details={"filename": filename} if filename else None,
        )
