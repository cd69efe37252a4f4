"""GCloud List Bucket operation."""

import json

import httpx

from gcloud_ops.config import AppConfig, ListBucketArgs
from gcloud_ops.dependencies import get_config, get_storage, http_client
from gcloud_ops.domain import ListOutputFormat, ObjectDescriptor
from gcloud_ops.domain.storage_uri import build_storage_uri, normalize_bucket
from gcloud_ops.exceptions import ValidationError


async def run(
    input_text: str,
    args: ListBucketArgs,
    client: httpx.AsyncClient | None = None,
    config: AppConfig | None = None,
) -> str:
    """
    Lists a bucket and renders its objects.

    ``input_text`` is a bucket name or any ``gs://bucket/...`` URI; only the
    bucket part is used, ``args.prefix`` selects the objects.
    """
    config = config or get_config()
    if not (input_text or "").strip():
        raise ValidationError("Please provide a GCS bucket name.")
    bucket = normalize_bucket(input_text)
    credential = args.to_credential()

    async with http_client(config, client) as http:
        storage = get_storage(http, config)
        items = await storage.list_objects(bucket, args.prefix, credential)

    if not items:
        return f"No objects found in {build_storage_uri(bucket, args.prefix or '')}"
    return format_listing(items, args.output_format)


def format_listing(
    items: list[ObjectDescriptor], output_format: ListOutputFormat
) -> str:
    if output_format == ListOutputFormat.FILENAMES:
        return "\n".join(item.name.split("/")[-1] for item in items)
    if output_format == ListOutputFormat.JSON:
        return json.dumps([item.model_dump(by_alias=True) for item in items], indent=2)
    return "\n".join(item.uri for item in items)
