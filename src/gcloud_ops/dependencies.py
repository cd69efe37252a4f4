"""Dependency wiring for gcloud_ops adapters."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from functools import lru_cache

import httpx

from gcloud_ops.config import AppConfig, load_config
from gcloud_ops.domain import TranscriptBuilder
from gcloud_ops.handlers import TranscriptionHandler
from gcloud_ops.infrastructure import (
    GCSStorageClient,
    GoogleSpeechRecognizer,
    OperationPoller,
)
from gcloud_ops.infrastructure.interfaces import SpeechRecognizer, StorageClient


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Returns the configuration loaded from the environment."""
    return load_config()


@asynccontextmanager
async def http_client(
    config: AppConfig, client: httpx.AsyncClient | None = None
) -> AsyncIterator[httpx.AsyncClient]:
    """Yields ``client`` unchanged, or a new client closed on exit."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=config.http.timeout_seconds) as owned:
        yield owned


def get_storage(client: httpx.AsyncClient, config: AppConfig) -> StorageClient:
    """Returns a storage client bound to ``client``."""
    return GCSStorageClient(client, config.endpoints)


def get_recognizer(client: httpx.AsyncClient, config: AppConfig) -> SpeechRecognizer:
    """Returns a speech recognizer bound to ``client``."""
    return GoogleSpeechRecognizer(client, config.endpoints)


def get_handler(client: httpx.AsyncClient, config: AppConfig) -> TranscriptionHandler:
    """Returns a transcription handler bound to ``client``."""
    return TranscriptionHandler(
        get_recognizer(client, config),
        OperationPoller(client),
        get_storage(client, config),
        TranscriptBuilder(),
        config.polling,
    )
