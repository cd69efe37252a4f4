"""Domain layer exports."""

from .credentials import apply_credential, build_credential, decode_secret
from .models import (
    AuthKind,
    Credential,
    InputMode,
    ListOutputFormat,
    ObjectDescriptor,
    OutputDestination,
    PollableOperation,
    SecretEncoding,
    TranscriptRequest,
    TranscriptResult,
)
from .storage_uri import build_storage_uri, encode_object_path, parse_storage_uri
from .transcript_builder import NO_SPEECH_DETECTED, TranscriptBuilder

__all__ = [
    "AuthKind",
    "Credential",
    "InputMode",
    "ListOutputFormat",
    "ObjectDescriptor",
    "OutputDestination",
    "PollableOperation",
    "SecretEncoding",
    "TranscriptRequest",
    "TranscriptResult",
    "TranscriptBuilder",
    "NO_SPEECH_DETECTED",
    "apply_credential",
    "build_credential",
    "decode_secret",
    "build_storage_uri",
    "encode_object_path",
    "parse_storage_uri",
]
