"""Core business logic for transcript building."""

from typing import Any

from .models import InputMode, TranscriptRequest, TranscriptResult
from .storage_uri import parse_storage_uri

NO_SPEECH_DETECTED = "(No speech detected)"
RAW_AUDIO_SOURCE_NAME = "raw_audio"


class TranscriptBuilder:
    """Builds flat transcripts from recognition responses."""

    def build(self, response: dict[str, Any] | None) -> TranscriptResult:
        """
        Flattens a recognition response into a single transcript.

        Both the synchronous ``recognize`` body and the ``response`` of a
        completed long-running operation share the
        ``{"results": [{"alternatives": [{"transcript": ...}]}]}`` shape.

        Args:
            response: The unwrapped recognition response.

        Returns:
            TranscriptResult whose text is the first alternative of every
            result joined by single spaces, or the no-speech sentinel.
        """
        results = (response or {}).get("results") or []
        if not results:
            return TranscriptResult(text=NO_SPEECH_DETECTED)

        pieces = (self._first_transcript(result) for result in results)
        text = " ".join(piece for piece in pieces if piece).strip()
        return TranscriptResult(text=text)

    def derive_output_path(self, request: TranscriptRequest) -> str:
        """Derives where a transcript for ``request`` is stored."""
        return f"output/audio/{self._source_name(request)}/speech-to-text/text.txt"

    def _source_name(self, request: TranscriptRequest) -> str:
        if request.mode != InputMode.GCS_URI:
            return RAW_AUDIO_SOURCE_NAME
        _, object_path = parse_storage_uri(request.payload)
        return object_path.rstrip("/").split("/")[-1]

    @staticmethod
    def _first_transcript(result: dict[str, Any]) -> str:
        alternatives = result.get("alternatives") or []
        if not alternatives:
            return ""
        return alternatives[0].get("transcript") or ""
