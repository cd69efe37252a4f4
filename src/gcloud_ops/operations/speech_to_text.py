"""GCloud Speech to Text operation."""

import asyncio

import httpx

from gcloud_ops.config import AppConfig, SpeechToTextArgs
from gcloud_ops.dependencies import get_config, get_handler, http_client
from gcloud_ops.domain import InputMode, OutputDestination, TranscriptRequest
from gcloud_ops.domain.storage_uri import STORAGE_SCHEME
from gcloud_ops.exceptions import ValidationError
from gcloud_ops.infrastructure.interfaces import ProgressListener


async def run(
    input_text: str,
    args: SpeechToTextArgs,
    client: httpx.AsyncClient | None = None,
    config: AppConfig | None = None,
    on_tick: ProgressListener | None = None,
    cancel: asyncio.Event | None = None,
) -> str:
    """
    Transcribes a ``gs://`` URI or Base64 audio.

    Returns the transcript, or with ``WRITE_TO_GCS`` the URI of
    ``output/audio/{filename}/speech-to-text/text.txt`` in the output bucket.
    """
    config = config or get_config()
    payload = (input_text or "").strip()
    if not payload:
        raise ValidationError("Please provide a GCS URI or Base64 audio input.")
    is_gcs_input = payload.startswith(f"{STORAGE_SCHEME}://")
    if args.input_mode == InputMode.GCS_URI and not is_gcs_input:
        raise ValidationError(
            "Input Mode is set to GCS URI but input does not start with "
            f"{STORAGE_SCHEME}://"
        )

    output_bucket = None
    if args.output_destination == OutputDestination.WRITE_TO_GCS:
        output_bucket = args.output_bucket.strip()
        if not output_bucket:
            raise ValidationError("Please provide an output GCS bucket.")

    request = TranscriptRequest(
        mode=args.input_mode,
        payload=payload,
        language_code=args.language_code,
        model=args.model,
    )
    credential = args.to_credential()

    async with http_client(config, client) as http:
        return await get_handler(http, config).transcribe(
            request,
            credential,
            output_bucket=output_bucket,
            max_wait_ms=int(args.max_poll_minutes * 60 * 1000),
            on_tick=on_tick,
            cancel=cancel,
        )
