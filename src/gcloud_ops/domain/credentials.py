"""Applying Google Cloud credentials to outbound requests."""

import base64
import binascii
from urllib.parse import quote

from gcloud_ops.exceptions import ValidationError

from .models import AuthKind, Credential, SecretEncoding

QUOTA_PROJECT_HEADER = "x-goog-user-project"

_MISSING_SECRET = "Please provide a valid GCP Auth String (API Key or OAuth Token)."


def decode_secret(raw: str, encoding: SecretEncoding = SecretEncoding.UTF8) -> str:
    """
    Decodes an auth string supplied in one of the supported textual encodings.

    Args:
        raw: The auth string as typed by the caller.
        encoding: How ``raw`` is encoded.

    Returns:
        The decoded secret. Empty input decodes to an empty string.

    Raises:
        ValidationError: If ``raw`` is not valid for ``encoding``.
    """
    if encoding in (SecretEncoding.UTF8, SecretEncoding.LATIN1):
        return raw
    text = raw.strip()
    if not text:
        return ""
    try:
        if encoding == SecretEncoding.BASE64:
            data = base64.b64decode(text, validate=True)
        else:
            data = bytes.fromhex(text)
        return data.decode("utf-8")
    except (binascii.Error, ValueError) as e:
        raise ValidationError(f"Auth string is not valid {encoding.value}", e) from e


def build_credential(
    kind: AuthKind,
    raw: str,
    encoding: SecretEncoding = SecretEncoding.UTF8,
    quota_project: str | None = None,
) -> Credential:
    """Resolves an encoded auth string into a credential."""
    return Credential(
        kind=kind,
        secret=decode_secret(raw, encoding),
        quota_project=quota_project or None,
    )


def require_secret(credential: Credential) -> None:
    if not credential.secret:
        raise ValidationError(_MISSING_SECRET)


def apply_credential(
    url: str, credential: Credential, headers: dict[str, str] | None = None
) -> tuple[str, dict[str, str]]:
    """
    Attaches a credential to a request target.

    API keys are appended as a ``key`` query parameter. OAuth tokens become a
    bearer ``Authorization`` header, plus the billing project header when a
    quota project is set.

    Args:
        url: The request URL, with or without a query string.
        credential: The credential to apply.
        headers: Headers to extend. Not modified; a new dict is returned.

    Returns:
        Tuple of (url, headers) to send.

    Raises:
        ValidationError: If the credential secret is empty.
    """
    require_secret(credential)
    applied = dict(headers or {})

    if credential.kind == AuthKind.API_KEY:
        separator = "&" if "?" in url else "?"
        url = f"{url}{separator}key={quote(credential.secret, safe='')}"
    else:
        applied["Authorization"] = f"Bearer {credential.secret}"
        if credential.quota_project:
            applied[QUOTA_PROJECT_HEADER] = credential.quota_project

    return url, applied
