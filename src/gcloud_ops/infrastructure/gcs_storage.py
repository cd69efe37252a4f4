"""Google Cloud Storage implementation of the StorageClient interface."""

import logging
from urllib.parse import urlencode

import httpx

from gcloud_ops.config import EndpointsConfig
from gcloud_ops.domain.credentials import require_secret
from gcloud_ops.domain.models import Credential, ObjectDescriptor
from gcloud_ops.domain.storage_uri import (
    build_storage_uri,
    encode_object_path,
    parse_storage_uri,
    validate_bucket,
)
from gcloud_ops.exceptions import ProtocolError, ValidationError

from .http import parse_json, raise_for_api_error, send
from .interfaces import StorageClient

logger = logging.getLogger(__name__)

LIST_FIELDS = "items(name,size,contentType)"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


class GCSStorageClient(StorageClient):
    """Handles object storage operations through the GCS JSON API."""

    def __init__(self, client: httpx.AsyncClient, endpoints: EndpointsConfig):
        self._client = client
        self._endpoints = endpoints

    async def list_objects(
        self, bucket: str, prefix: str, credential: Credential
    ) -> list[ObjectDescriptor]:
        require_secret(credential)
        validate_bucket(bucket)

        query = {"fields": LIST_FIELDS}
        if prefix:
            query = {"prefix": prefix, **query}
        url = f"{self._endpoints.storage_root}/b/{bucket}/o?{urlencode(query)}"

        response = await send(self._client, "GET", url, credential)
        raise_for_api_error(response)
        body = parse_json(response, "GCloud List Bucket")

        items = body.get("items") or []
        if not isinstance(items, list):
            raise ProtocolError("GCloud List Bucket: 'items' is not a list.")

        descriptors = [
            self._to_descriptor(bucket, item)
            for item in items
            if isinstance(item, dict)
            and item.get("name")
            and not item["name"].endswith("/")
        ]
        logger.info(
            "Bucket listed",
            extra={
                "bucket_name": bucket,
                "prefix": prefix,
                "object_count": len(descriptors),
            },
        )
        return descriptors

    async def read(self, uri: str, credential: Credential) -> bytes:
        require_secret(credential)
        bucket, object_path = parse_storage_uri(uri)
        url = (
            f"{self._endpoints.storage_root}/b/{bucket}/o/"
            f"{encode_object_path(object_path)}?alt=media"
        )

        response = await send(self._client, "GET", url, credential)
        raise_for_api_error(response)

        logger.info(
            "File downloaded from GCS",
            extra={
                "bucket_name": bucket,
                "object_name": object_path,
                "size": len(response.content),
            },
        )
        return response.content

    async def write(
        self, bucket: str, object_path: str, content: str, credential: Credential
    ) -> str:
        require_secret(credential)
        validate_bucket(bucket)
        if not object_path:
            raise ValidationError("Please provide an object path to write to.")

        url = (
            f"{self._endpoints.storage_upload_root}/b/{bucket}/o"
            f"?uploadType=media&name={encode_object_path(object_path)}"
        )
        response = await send(
            self._client,
            "POST",
            url,
            credential,
            headers={"Content-Type": TEXT_CONTENT_TYPE},
            content=content.encode("utf-8"),
        )
        raise_for_api_error(response)

        logger.info(
            "File uploaded to GCS",
            extra={"bucket_name": bucket, "object_name": object_path},
        )
        return build_storage_uri(bucket, object_path)

    @staticmethod
    def _to_descriptor(bucket: str, item: dict) -> ObjectDescriptor:
        size = item.get("size")
        try:
            size = int(size) if size is not None else None
        except (TypeError, ValueError) as e:
            raise ProtocolError(
                f"GCloud List Bucket: invalid size for '{item['name']}'.", e
            ) from e
        return ObjectDescriptor(
            name=item["name"],
            uri=build_storage_uri(bucket, item["name"]),
            size=size,
            content_type=item.get("contentType"),
        )
