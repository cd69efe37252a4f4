"""Abstract interface for speech recognition backends."""

from abc import ABC, abstractmethod
from typing import Any

from gcloud_ops.domain.models import Credential, TranscriptRequest


class SpeechRecognizer(ABC):
    """Abstract base class for speech recognition backends."""

    @property
    @abstractmethod
    def operations_url(self) -> str:
        """Base URL that an operation id is appended to for status checks."""

    @abstractmethod
    async def recognize(
        self, request: TranscriptRequest, credential: Credential
    ) -> dict[str, Any]:
        """
        Runs synchronous recognition on inline audio.

        Returns:
            The recognition response, shaped ``{"results": [...]}``.

        Raises:
            RemoteApiError: If the backend rejects the request.
            ProtocolError: If the response cannot be parsed.
        """

    @abstractmethod
    async def submit_long_running(
        self, request: TranscriptRequest, credential: Credential
    ) -> str:
        """
        Submits asynchronous recognition of audio stored at a URI.

        Returns:
            The identifier of the created long-running operation.

        Raises:
            RemoteApiError: If the backend rejects the request.
            ProtocolError: If no operation identifier is returned.
        """
