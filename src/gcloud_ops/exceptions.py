"""Custom exceptions for Google Cloud operations."""


class GCloudError(Exception):
    """Base class for every error raised by gcloud_ops."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class ValidationError(GCloudError):
    """Raised when input is rejected before any request is issued."""


class RemoteApiError(GCloudError):
    """Raised when a Google API answers with a non-success status.

    Transport failures that never produced a response carry ``status=None``.
    """

    def __init__(
        self, status: int | None, message: str, cause: Exception | None = None
    ):
        self.status = status
        self.message = message
        prefix = f"API Error ({status})" if status is not None else "API Error"
        super().__init__(f"{prefix}: {message}", cause)


class ProtocolError(GCloudError):
    """Raised when a response body cannot be parsed or lacks a required field."""


class OperationTimeoutError(GCloudError):
    """Raised when a long-running operation does not finish before its deadline."""

    def __init__(self, operation_id: str, elapsed_minutes: float):
        self.operation_id = operation_id
        self.elapsed_minutes = elapsed_minutes
        super().__init__(
            f"Operation '{operation_id}' did not complete within "
            f"{elapsed_minutes:.1f} minutes"
        )


class OperationCancelledError(GCloudError):
    """Raised when polling is stopped through its cancel token."""

    def __init__(self, operation_id: str):
        self.operation_id = operation_id
        super().__init__(f"Polling of operation '{operation_id}' was cancelled")
