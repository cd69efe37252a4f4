"""Polling of Google long-running operations."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

import httpx

from gcloud_ops.domain.credentials import require_secret
from gcloud_ops.domain.models import Credential, PollableOperation
from gcloud_ops.exceptions import OperationCancelledError, OperationTimeoutError

from .http import parse_json, raise_for_api_error, send
from .interfaces import ProgressListener

logger = logging.getLogger(__name__)

DEFAULT_MAX_WAIT_MS = 30 * 60 * 1000
DEFAULT_INTERVAL_MS = 10 * 1000


class OperationPoller:
    """Watches a long-running operation until it is done or its deadline passes."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._client = client
        self._sleep = sleep
        self._clock = clock

    async def poll(
        self,
        operation_id: str,
        base_url: str,
        credential: Credential,
        max_wait_ms: int = DEFAULT_MAX_WAIT_MS,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        on_tick: ProgressListener | None = None,
        cancel: asyncio.Event | None = None,
    ) -> PollableOperation:
        """
        Fetches the operation status every ``interval_ms`` until it reports done.

        The deadline is checked before each status request, so an expired
        deadline never costs another round trip. Status checks are strictly
        sequential.

        Args:
            operation_id: Identifier returned by the submission call.
            base_url: Status endpoint the identifier is appended to.
            credential: Credential applied to every status request.
            max_wait_ms: Deadline measured from the start of polling.
            interval_ms: Pause between two status requests.
            on_tick: Notified with elapsed seconds after each unfinished check.
            cancel: Stops polling before the next check once set.

        Returns:
            The completed operation.

        Raises:
            OperationTimeoutError: If the deadline passes first.
            OperationCancelledError: If ``cancel`` is set.
            RemoteApiError: If a status request fails.
            ProtocolError: If a status response cannot be parsed.
        """
        require_secret(credential)
        started = self._clock()
        url = f"{base_url}{operation_id}"
        checks = 0

        while True:
            if cancel is not None and cancel.is_set():
                logger.info("Polling cancelled", extra={"operation_id": operation_id})
                raise OperationCancelledError(operation_id)

            elapsed = self._clock() - started
            if elapsed * 1000 >= max_wait_ms:
                logger.warning(
                    "Operation timed out",
                    extra={
                        "operation_id": operation_id,
                        "elapsed_seconds": round(elapsed),
                    },
                )
                raise OperationTimeoutError(operation_id, elapsed / 60)

            response = await send(self._client, "GET", url, credential)
            checks += 1
            raise_for_api_error(response)
            payload = parse_json(response, "Operation status")

            operation = PollableOperation(
                id=operation_id, done=payload.get("done") is True, payload=payload
            )
            if operation.done:
                logger.info(
                    "Operation completed",
                    extra={"operation_id": operation_id, "status_checks": checks},
                )
                return operation

            self._notify(on_tick, round(self._clock() - started))
            await self._sleep(interval_ms / 1000)

    @staticmethod
    def _notify(on_tick: ProgressListener | None, elapsed_seconds: int) -> None:
        if on_tick is None:
            return
        try:
            on_tick(elapsed_seconds)
        except Exception:
            logger.exception(
                "Progress listener failed",
                extra={"elapsed_seconds": elapsed_seconds},
            )
