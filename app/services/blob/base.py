"""Base class for blob stores."""

from abc import ABC, abstractmethod


class BlobStore(ABC):
    """Abstract base class for blob storage backends.

    Stored objects are referenced everywhere else by their public URL. Each
    backend owns the mapping from such a URL back to its own object key.
    """

    @abstractmethod
    async def upload(
        self, data: bytes, folder: str, filename: str, content_type: str
    ) -> str:
        """Store ``data`` under ``folder`` and return its public URL.

        Raises:
            BlobStorageError: the backend rejected or failed the upload
        """
        pass

    @abstractmethod
    async def delete(self, url: str) -> None:
        """Delete the object behind ``url``; unknown URLs are ignored."""
        pass

    @abstractmethod
    def key_from_url(self, url: str) -> str | None:
        """Return the backend object key for a public URL, if it is ours."""
        pass
