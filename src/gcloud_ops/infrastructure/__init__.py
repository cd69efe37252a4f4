"""Infrastructure layer exports."""

from .gcs_storage import GCSStorageClient
from .operation_poller import OperationPoller
from .speech_recognizer import GoogleSpeechRecognizer

__all__ = ["GCSStorageClient", "GoogleSpeechRecognizer", "OperationPoller"]
