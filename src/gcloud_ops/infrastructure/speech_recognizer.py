"""Google Cloud Speech-to-Text implementation of the SpeechRecognizer interface."""

import logging
from typing import Any

import httpx

from gcloud_ops.config import EndpointsConfig
from gcloud_ops.domain.models import Credential, InputMode, TranscriptRequest
from gcloud_ops.exceptions import ProtocolError

from .http import JSON_CONTENT_TYPE, parse_json, raise_for_api_error, send
from .interfaces import SpeechRecognizer

logger = logging.getLogger(__name__)


class GoogleSpeechRecognizer(SpeechRecognizer):
    """Submits recognition requests to the Speech-to-Text v1 REST API."""

    def __init__(self, client: httpx.AsyncClient, endpoints: EndpointsConfig):
        self._client = client
        self._endpoints = endpoints

    @property
    def operations_url(self) -> str:
        return f"{self._endpoints.speech_root}/operations/"

    async def recognize(
        self, request: TranscriptRequest, credential: Credential
    ) -> dict[str, Any]:
        body = await self._post("speech:recognize", request, credential)
        logger.info(
            "Synchronous recognition completed",
            extra={"result_count": len(body.get("results") or [])},
        )
        return body

    async def submit_long_running(
        self, request: TranscriptRequest, credential: Credential
    ) -> str:
        body = await self._post("speech:longrunningrecognize", request, credential)
        operation_id = body.get("name")
        if not operation_id:
            raise ProtocolError(
                "GCloud Speech to Text: No operation name returned from API."
            )
        logger.info("Recognition job submitted", extra={"operation_id": operation_id})
        return str(operation_id)

    async def _post(
        self, method: str, request: TranscriptRequest, credential: Credential
    ) -> dict[str, Any]:
        response = await send(
            self._client,
            "POST",
            f"{self._endpoints.speech_root}/{method}",
            credential,
            headers={"Content-Type": JSON_CONTENT_TYPE},
            json=self._request_body(request),
        )
        raise_for_api_error(response)
        return parse_json(response, "GCloud Speech to Text")

    @staticmethod
    def _request_body(request: TranscriptRequest) -> dict[str, Any]:
        if request.mode == InputMode.GCS_URI:
            audio = {"uri": request.payload}
        else:
            audio = {"content": request.payload}
        return {
            "config": {
                "languageCode": request.language_code,
                "model": request.model,
                "enableAutomaticPunctuation": True,
            },
            "audio": audio,
        }
