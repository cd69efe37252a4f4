"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod

from gcloud_ops.domain.models import Credential, ObjectDescriptor


class StorageClient(ABC):
    """Abstract base class for object storage backends."""

    @abstractmethod
    async def list_objects(
        self, bucket: str, prefix: str, credential: Credential
    ) -> list[ObjectDescriptor]:
        """
        Lists the objects of a bucket.

        Args:
            bucket: The bucket name.
            prefix: Only objects whose name starts with this are returned.
                An empty prefix lists the whole bucket.
            credential: Credential used for the request.

        Returns:
            Descriptors in backend order, folder placeholders excluded.

        Raises:
            ValidationError: If the credential or bucket is missing.
            RemoteApiError: If the backend rejects the request.
            ProtocolError: If the listing cannot be parsed.
        """

    @abstractmethod
    async def read(self, uri: str, credential: Credential) -> bytes:
        """
        Downloads the content of an object.

        Args:
            uri: Object URI of the form ``gs://bucket/object-path``.
            credential: Credential used for the request.

        Returns:
            The raw object bytes.

        Raises:
            ValidationError: If the URI or credential is invalid.
            RemoteApiError: If the backend rejects the request.
        """

    @abstractmethod
    async def write(
        self, bucket: str, object_path: str, content: str, credential: Credential
    ) -> str:
        """
        Uploads UTF-8 text as an object.

        Args:
            bucket: The destination bucket.
            object_path: The destination object path.
            content: Text to store.
            credential: Credential used for the request.

        Returns:
            The ``gs://`` URI of the written object.

        Raises:
            ValidationError: If the bucket, path or credential is missing.
            RemoteApiError: If the backend rejects the upload.
        """
