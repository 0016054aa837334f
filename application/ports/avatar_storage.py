"""
Avatar Storage Interface (Port).

File storage internals are delegated to the storage backend; the API only
needs "put these bytes at this path and give me a public URL".
"""
from typing import Protocol


class AvatarStorage(Protocol):
    """Abstract interface for profile picture storage."""

    def upload(self, path: str, content: bytes, content_type: str) -> str:
        """
        Store (or replace) a file.

        Args:
            path: Object path inside the avatar bucket
            content: Raw file bytes
            content_type: MIME type sent with the object

        Returns:
            Public URL of the stored object

        Raises:
            UpstreamFailure: If the upload fails or no public URL is available
        """
        ...
