"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field

from gcloud_ops.domain.credentials import build_credential
from gcloud_ops.domain.models import (
    AuthKind,
    Credential,
    InputMode,
    ListOutputFormat,
    OutputDestination,
    SecretEncoding,
)

SPEECH_MODELS = (
    "latest_long",
    "latest_short",
    "telephony",
    "medical_dictation",
    "default",
)


class EndpointsConfig(BaseModel, frozen=True):
    """Google REST API roots."""

    storage_root: str = "https://storage.googleapis.com/storage/v1"
    storage_upload_root: str = "https://storage.googleapis.com/upload/storage/v1"
    speech_root: str = "https://speech.googleapis.com/v1"


class PollingConfig(BaseModel, frozen=True):
    """Default policy for long-running operation polling."""

    max_wait_minutes: float = 30
    interval_seconds: float = 10

    @property
    def max_wait_ms(self) -> int:
        return int(self.max_wait_minutes * 60 * 1000)

    @property
    def interval_ms(self) -> int:
        return int(self.interval_seconds * 1000)


class HttpConfig(BaseModel, frozen=True):
    """HTTP client configuration."""

    timeout_seconds: float = 60


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    endpoints: EndpointsConfig = EndpointsConfig()
    polling: PollingConfig = PollingConfig()
    http: HttpConfig = HttpConfig()


class AuthArgs(BaseModel, frozen=True):
    """Authentication arguments shared by every operation."""

    auth_type: AuthKind = AuthKind.API_KEY
    auth_string: str = ""
    auth_encoding: SecretEncoding = SecretEncoding.UTF8
    quota_project: str = ""

    def to_credential(self) -> Credential:
        return build_credential(
            self.auth_type, self.auth_string, self.auth_encoding, self.quota_project
        )


class ListBucketArgs(AuthArgs, frozen=True):
    prefix: str = "audio/"
    output_format: ListOutputFormat = ListOutputFormat.URIS


class ReadFileArgs(AuthArgs, frozen=True):
    pass


class SpeechToTextArgs(AuthArgs, frozen=True):
    input_mode: InputMode = InputMode.GCS_URI
    language_code: str = "en-US"
    model: str = Field(default="latest_long", pattern=f"^({'|'.join(SPEECH_MODELS)})$")
    output_destination: OutputDestination = OutputDestination.RETURN
    output_bucket: str = ""
    max_poll_minutes: float = Field(default=30, ge=0)


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        endpoints=EndpointsConfig(
            storage_root=os.getenv(
                "GCLOUD_STORAGE_ROOT", "https://storage.googleapis.com/storage/v1"
            ),
            storage_upload_root=os.getenv(
                "GCLOUD_STORAGE_UPLOAD_ROOT",
                "https://storage.googleapis.com/upload/storage/v1",
            ),
            speech_root=os.getenv(
                "GCLOUD_SPEECH_ROOT", "https://speech.googleapis.com/v1"
            ),
        ),
        polling=PollingConfig(
            max_wait_minutes=float(os.getenv("GCLOUD_MAX_POLL_MINUTES", "30")),
            interval_seconds=float(os.getenv("GCLOUD_POLL_INTERVAL_SECONDS", "10")),
        ),
        http=HttpConfig(
            timeout_seconds=float(os.getenv("GCLOUD_HTTP_TIMEOUT_SECONDS", "60")),
        ),
    )
