"""Handler orchestrating speech-to-text transcription."""

import asyncio
import logging

from gcloud_ops.config import PollingConfig
from gcloud_ops.domain import (
    Credential,
    InputMode,
    TranscriptBuilder,
    TranscriptRequest,
    TranscriptResult,
)
from gcloud_ops.domain.credentials import require_secret
from gcloud_ops.domain.storage_uri import parse_storage_uri
from gcloud_ops.exceptions import (
    GCloudError,
    ProtocolError,
    RemoteApiError,
    ValidationError,
)
from gcloud_ops.infrastructure import OperationPoller
from gcloud_ops.infrastructure.interfaces import (
    ProgressListener,
    SpeechRecognizer,
    StorageClient,
)

logger = logging.getLogger(__name__)


class TranscriptionHandler:
    """Orchestrates recognition, transcript extraction and optional storage."""

    def __init__(
        self,
        recognizer: SpeechRecognizer,
        poller: OperationPoller,
        storage: StorageClient,
        transcript_builder: TranscriptBuilder,
        polling: PollingConfig = PollingConfig(),
    ):
        self._recognizer = recognizer
        self._poller = poller
        self._storage = storage
        self._transcript_builder = transcript_builder
        self._polling = polling

    async def transcribe(
        self,
        request: TranscriptRequest,
        credential: Credential,
        output_bucket: str | None = None,
        max_wait_ms: int | None = None,
        on_tick: ProgressListener | None = None,
        cancel: asyncio.Event | None = None,
    ) -> str:
        """
        Transcribes audio and returns the transcript, or where it was written.

        GCS URIs go through asynchronous recognition and are polled until
        done; inline Base64 audio uses synchronous recognition.

        Args:
            request: What to transcribe.
            credential: Credential applied to every request.
            output_bucket: When given, the transcript is written to this
                bucket and its URI is returned instead of the text.
            max_wait_ms: Polling deadline, defaults to the configured policy.
            on_tick: Progress listener for asynchronous recognition.
            cancel: Cancel token for asynchronous recognition.

        Returns:
            The transcript text, or the ``gs://`` URI it was written to.

        Raises:
            ValidationError: If the input or credential is invalid.
            RemoteApiError: If an API call fails.
            ProtocolError: If a response is malformed or an unexpected
                failure occurs.
            OperationTimeoutError: If recognition does not finish in time.
        """
        try:
            return await self._transcribe(
                request, credential, output_bucket, max_wait_ms, on_tick, cancel
            )
        except GCloudError:
            raise
        except Exception as e:
            logger.exception(
                "Transcription failed", extra={"input_mode": request.mode.value}
            )
            raise ProtocolError(f"GCloud Speech to Text: {e}", e) from e

    async def _transcribe(
        self,
        request: TranscriptRequest,
        credential: Credential,
        output_bucket: str | None,
        max_wait_ms: int | None,
        on_tick: ProgressListener | None,
        cancel: asyncio.Event | None,
    ) -> str:
        if not request.payload.strip():
            raise ValidationError("Please provide a GCS URI or Base64 audio input.")
        require_secret(credential)

        logger.info(
            "Processing transcription",
            extra={
                "input_mode": request.mode.value,
                "language_code": request.language_code,
            },
        )

        if request.mode == InputMode.GCS_URI:
            parse_storage_uri(request.payload)
            result = await self._transcribe_uri(
                request, credential, max_wait_ms, on_tick, cancel
            )
        elif request.mode == InputMode.RAW_BYTES_BASE64:
            response = await self._recognizer.recognize(request, credential)
            result = self._transcript_builder.build(response)
        else:
            raise ValidationError(f"Unsupported input mode '{request.mode}'")

        if not output_bucket:
            return result.text

        object_path = self._transcript_builder.derive_output_path(request)
        uri = await self._storage.write(
            output_bucket, object_path, result.text, credential
        )
        logger.info("Transcript stored", extra={"transcription_file": uri})
        return uri

    async def _transcribe_uri(
        self,
        request: TranscriptRequest,
        credential: Credential,
        max_wait_ms: int | None,
        on_tick: ProgressListener | None,
        cancel: asyncio.Event | None,
    ) -> TranscriptResult:
        operation_id = await self._recognizer.submit_long_running(request, credential)
        if max_wait_ms is None:
            max_wait_ms = self._polling.max_wait_ms
        operation = await self._poller.poll(
            operation_id,
            self._recognizer.operations_url,
            credential,
            max_wait_ms=max_wait_ms,
            interval_ms=self._polling.interval_ms,
            on_tick=on_tick,
            cancel=cancel,
        )

        error = operation.payload.get("error")
        if isinstance(error, dict):
            raise RemoteApiError(
                error.get("code"),
                error.get("message") or "Recognition operation failed",
            )
        return self._transcript_builder.build(operation.payload.get("response"))
