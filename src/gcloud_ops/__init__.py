from gcloud_ops.exceptions import (
    GCloudError,
    OperationCancelledError,
    OperationTimeoutError,
    ProtocolError,
    RemoteApiError,
    ValidationError,
)
from gcloud_ops.logging import setup_logging

__all__ = [
    "setup_logging",
    "GCloudError",
    "ValidationError",
    "RemoteApiError",
    "ProtocolError",
    "OperationTimeoutError",
    "OperationCancelledError",
]
