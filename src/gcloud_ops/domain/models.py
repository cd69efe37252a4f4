"""Domain models for Google Cloud operations."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class AuthKind(str, Enum):
    """How a credential is presented to Google APIs."""

    API_KEY = "API Key"
    OAUTH_TOKEN = "OAuth Token"


class SecretEncoding(str, Enum):
    """Textual encodings an auth string may be supplied in."""

    UTF8 = "UTF8"
    LATIN1 = "Latin1"
    BASE64 = "Base64"
    HEX = "Hex"


class InputMode(str, Enum):
    """Where the audio for a transcription comes from."""

    GCS_URI = "GCS URI (gs://...)"
    RAW_BYTES_BASE64 = "Raw Audio Bytes (Base64)"


class OutputDestination(str, Enum):
    RETURN = "Return to caller"
    WRITE_TO_GCS = "Write to GCS"


class ListOutputFormat(str, Enum):
    URIS = "GCS URIs (one per line)"
    FILENAMES = "Filenames only"
    JSON = "JSON"


class Credential(BaseModel, frozen=True):
    """A decoded secret together with its auth kind."""

    kind: AuthKind
    secret: str
    quota_project: str | None = None


class ObjectDescriptor(BaseModel, frozen=True):
    """A single object stored in a bucket.

    Serialised with the listing keys ``gs_uri`` and ``contentType``.
    """

    name: str
    uri: str = Field(serialization_alias="gs_uri")
    size: int | None = None
    content_type: str | None = Field(default=None, serialization_alias="contentType")


class PollableOperation(BaseModel, frozen=True):
    """Snapshot of a long-running operation as last reported by the server."""

    id: str
    done: bool = False
    payload: dict[str, Any] = {}


class TranscriptRequest(BaseModel, frozen=True):
    """Immutable description of a transcription job."""

    mode: InputMode
    payload: str
    language_code: str = "en-US"
    model: str = "latest_long"


class TranscriptResult(BaseModel, frozen=True):
    text: str
