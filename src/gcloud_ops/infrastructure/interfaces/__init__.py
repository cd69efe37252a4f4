"""Infrastructure interface exports."""

from collections.abc import Callable

from .speech_recognizer import SpeechRecognizer
from .storage_client import StorageClient

# Receives the seconds elapsed since polling started.
ProgressListener = Callable[[int], None]

__all__ = ["ProgressListener", "SpeechRecognizer", "StorageClient"]
