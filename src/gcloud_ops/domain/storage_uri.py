"""Parsing and building of ``gs://bucket/object`` URIs."""

import re
from urllib.parse import quote

from gcloud_ops.exceptions import ValidationError

STORAGE_SCHEME = "gs"

_URI_PATTERN = re.compile(rf"^{STORAGE_SCHEME}://([^/]+)/(.+)$")
_BUCKET_PATTERN = re.compile(r"^[a-z0-9][a-z0-9._-]*$")


def validate_bucket(bucket: str) -> str:
    """
    Checks a bucket name against the characters GCS allows.

    Returns:
        The bucket name, unchanged.

    Raises:
        ValidationError: If the name is empty or has disallowed characters.
    """
    if not _BUCKET_PATTERN.match(bucket or ""):
        raise ValidationError(f"Invalid GCS bucket name {bucket!r}")
    return bucket


def parse_storage_uri(uri: str) -> tuple[str, str]:
    """
    Splits a storage URI into bucket and object path.

    Args:
        uri: URI of the form ``gs://bucket/object-path``.

    Returns:
        Tuple of (bucket, object_path).

    Raises:
        ValidationError: If the URI has no scheme, bucket or object path, or
            the bucket name is not valid.
    """
    match = _URI_PATTERN.match(uri or "")
    if not match:
        raise ValidationError(
            f"Invalid GCS URI {uri!r}: expected {STORAGE_SCHEME}://bucket/object-path"
        )
    return validate_bucket(match.group(1)), match.group(2)


def build_storage_uri(bucket: str, object_path: str) -> str:
    return f"{STORAGE_SCHEME}://{bucket}/{object_path}"


def encode_object_path(object_path: str) -> str:
    """Percent-encodes an object path while keeping ``/`` separators literal."""
    return quote(object_path, safe="").replace("%2F", "/")


def normalize_bucket(value: str) -> str:
    """
    Reduces ``gs://bucket/some/prefix`` or ``bucket/`` to ``bucket``.

    Raises:
        ValidationError: If no valid bucket name remains.
    """
    stripped = value.strip()
    if stripped.startswith(f"{STORAGE_SCHEME}://"):
        stripped = stripped[len(STORAGE_SCHEME) + 3 :]
    return validate_bucket(stripped.split("/")[0])
