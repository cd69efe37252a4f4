"""Shared request and response handling for Google REST APIs."""

import logging
from typing import Any

import httpx

from gcloud_ops.domain.credentials import apply_credential
from gcloud_ops.domain.models import Credential
from gcloud_ops.exceptions import ProtocolError, RemoteApiError, ValidationError

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


async def send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    credential: Credential,
    headers: dict[str, str] | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """
    Applies the credential and issues a single request.

    A URL httpx refuses to build is raised as ``ValidationError``; transport
    failures are raised as ``RemoteApiError`` without a status.
    """
    url, headers = apply_credential(url, credential, headers)
    try:
        return await client.request(method, url, headers=headers, **kwargs)
    except httpx.InvalidURL as e:
        raise ValidationError("Request URL is not valid", e) from e
    except httpx.HTTPError as e:
        logger.exception("Request to Google API failed", extra={"method": method})
        raise RemoteApiError(None, f"Request failed: {type(e).__name__}", e) from e


def error_message(response: httpx.Response) -> str:
    """Extracts ``error.message`` from an error body, else the status text."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return response.reason_phrase


def raise_for_api_error(response: httpx.Response) -> None:
    """Raises ``RemoteApiError`` for any non-success status."""
    if response.is_success:
        return
    message = error_message(response)
    logger.warning(
        "Google API returned an error",
        extra={"status": response.status_code, "error_message": message},
    )
    raise RemoteApiError(response.status_code, message)


def parse_json(response: httpx.Response, context: str) -> dict[str, Any]:
    """Decodes a JSON object body, raising ``ProtocolError`` otherwise."""
    try:
        body = response.json()
    except ValueError as e:
        raise ProtocolError(f"{context}: Failed to parse API response.", e) from e
    if not isinstance(body, dict):
        raise ProtocolError(f"{context}: Expected a JSON object in API response.")
    return body
