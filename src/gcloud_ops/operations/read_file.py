"""GCloud Read File operation."""

import httpx

from gcloud_ops.config import AppConfig, ReadFileArgs
from gcloud_ops.dependencies import get_config, get_storage, http_client
from gcloud_ops.domain.storage_uri import STORAGE_SCHEME
from gcloud_ops.exceptions import ValidationError


async def run(
    input_text: str,
    args: ReadFileArgs,
    client: httpx.AsyncClient | None = None,
    config: AppConfig | None = None,
) -> bytes:
    """Downloads the object named by a ``gs://`` URI and returns its bytes."""
    config = config or get_config()
    uri = (input_text or "").strip()
    if not uri.startswith(f"{STORAGE_SCHEME}://"):
        raise ValidationError(
            f"Input must be a GCS URI starting with {STORAGE_SCHEME}://"
        )
    credential = args.to_credential()

    async with http_client(config, client) as http:
        return await get_storage(http, config).read(uri, credential)
